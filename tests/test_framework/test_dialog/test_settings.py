import json
import pytest
import jsonschema
from pydantic import ValidationError
from dialog_framework.dialog.settings import DialogSettings, load_settings

def test_defaults():
    settings = DialogSettings()
    assert settings.choice_slots == 4
    assert settings.tree_name("intro") == "Dialogs/Trees/intro"
    assert settings.pairs_name("en") == "Dialogs/Pairs/en"

def test_slots_must_be_positive():
    with pytest.raises(ValidationError):
        DialogSettings(choice_slots=0)

def test_load_manifest(tmp_path):
    manifest = tmp_path / "dialogs.json"
    manifest.write_text(json.dumps({
        "resource_root": "Resources",
        "pair_files": ["en"],
        "tree_files": ["guard"],
        "choice_slots": 3,
    }))

    settings = load_settings(manifest)

    assert settings.resource_root == tmp_path / "Resources"
    assert settings.tree_files == ["guard"]
    assert settings.choice_slots == 3

def test_manifest_validation_error(tmp_path, caplog):
    manifest = tmp_path / "dialogs.json"
    manifest.write_text(json.dumps({"tree_files": "guard"}))

    with pytest.raises(jsonschema.ValidationError):
        load_settings(manifest)
    assert "Validation error" in caplog.text

def test_unknown_manifest_key(tmp_path):
    manifest = tmp_path / "dialogs.json"
    manifest.write_text(json.dumps({"slots": 4}))

    with pytest.raises(jsonschema.ValidationError):
        load_settings(manifest)
