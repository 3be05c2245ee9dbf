import pytest
from dialog_framework.dialog.localization import LocalizationTable
from dialog_framework.dialog.errors import ParseError

def test_load_and_resolve():
    table = LocalizationTable()
    count = table.load("<pairs><hi>Hello</hi><bye>  Goodbye  </bye></pairs>")

    assert count == 2
    assert table.resolve("hi") == "Hello"
    # Body whitespace is trimmed
    assert table.resolve("bye") == "Goodbye"

def test_unknown_key_falls_back_to_key():
    table = LocalizationTable()
    assert table.resolve("not_a_key") == "not_a_key"
    assert "not_a_key" not in table

def test_resolve_is_stable_until_overwritten():
    table = LocalizationTable()
    table.load("<pairs><hi>Hello</hi></pairs>")

    assert table.resolve("hi") == table.resolve("hi") == "Hello"

    table.load("<pairs><hi>Howdy</hi></pairs>", source="override")
    assert table.resolve("hi") == "Howdy"
    assert len(table) == 1

def test_nested_markup_is_flattened():
    table = LocalizationTable()
    table.load("<pairs><warn>Mind the <b>gap</b>!</warn></pairs>")
    assert table.resolve("warn") == "Mind the gap!"

def test_parse_error_commits_nothing():
    table = LocalizationTable()
    table.load("<pairs><hi>Hello</hi></pairs>")

    with pytest.raises(ParseError) as exc:
        table.load("<pairs><hi>Broken</pairs>", source="broken")

    assert exc.value.source == "broken"
    assert table.resolve("hi") == "Hello"
    assert len(table) == 1
