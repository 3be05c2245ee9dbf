"""
Dialog settings - which documents to load and how many choice slots
the presentation offers.

Settings usually come from a JSON manifest:

```
{
    "resource_root": "Resources",
    "pair_files": ["en"],
    "tree_files": ["guard", "merchant"],
    "choice_slots": 4
}
```
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import jsonschema
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

MANIFEST_SCHEMA = {
    "type": "object",
    "properties": {
        "resource_root": {"type": "string"},
        "pairs_dir": {"type": "string"},
        "trees_dir": {"type": "string"},
        "extension": {"type": "string"},
        "pair_files": {"type": "array", "items": {"type": "string"}},
        "tree_files": {"type": "array", "items": {"type": "string"}},
        "choice_slots": {"type": "integer", "minimum": 1},
    },
    "additionalProperties": False,
}


class DialogSettings(BaseModel):
    """
    Dialog configuration.

    Attributes:
        resource_root: Folder holding the dialog documents
        pairs_dir: Pairs documents folder, relative to the root
        trees_dir: Tree documents folder, relative to the root
        extension: File extension of every document
        pair_files: Pairs documents loaded at startup, in order
        tree_files: Tree documents loaded at startup, in order
        choice_slots: Number of choice slots the presentation offers
    """

    model_config = ConfigDict(extra='forbid')

    resource_root: Path = Path("Resources")
    pairs_dir: str = "Dialogs/Pairs"
    trees_dir: str = "Dialogs/Trees"
    extension: str = ".xml"
    pair_files: list[str] = Field(default_factory=list)
    tree_files: list[str] = Field(default_factory=list)
    choice_slots: int = Field(default=4, ge=1)

    def pairs_name(self, name: str) -> str:
        """Resource name of a pairs document."""
        return f"{self.pairs_dir}/{name}"

    def tree_name(self, name: str) -> str:
        """Resource name of a tree document."""
        return f"{self.trees_dir}/{name}"


def load_settings(path: Path | str) -> DialogSettings:
    """
    Load settings from a JSON manifest.

    A relative ``resource_root`` is taken relative to the manifest's folder.

    Raises:
        FileNotFoundError: If the manifest does not exist
        json.JSONDecodeError: If the manifest is not valid JSON
        jsonschema.ValidationError: If the manifest does not match MANIFEST_SCHEMA
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    try:
        jsonschema.validate(instance=data, schema=MANIFEST_SCHEMA)
    except jsonschema.ValidationError as e:
        logger.error(f"Validation error in {path}: {e.message}")
        raise

    settings = DialogSettings.model_validate(data)
    if not settings.resource_root.is_absolute():
        settings.resource_root = path.parent / settings.resource_root

    return settings
