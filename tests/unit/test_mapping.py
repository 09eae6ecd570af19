"""Tests for mapping tables."""

import json

import pytest

from latinize.mapping import (
    DEFAULT_PAIRS,
    FormatError,
    default_table,
    load_table,
    parse_table,
    table_to_dict,
    write_table,
)


def test_default_table_size():
    """Test that the default table covers 33 upper and 33 lower letters."""
    table = default_table()

    assert len(table) == 66
    assert sum(1 for key in table if key.isupper()) == 33
    assert sum(1 for key in table if key.islower()) == 33
    assert all(len(key) == 1 for key in table)


def test_default_table_entries():
    """Test a sample of canonical romanizations."""
    table = default_table()

    assert table["Щ"] == "Shch"
    assert table["щ"] == "shch"
    assert table["Ё"] == "Yo"
    assert table["х"] == "kh"
    assert table["Ц"] == "Ts"
    assert table["ъ"] == ""
    assert table["Ь"] == ""
    assert table["й"] == "y"


def test_default_table_is_read_only():
    """Test that the default table cannot be mutated."""
    table = default_table()

    with pytest.raises(TypeError):
        table["а"] = "x"  # type: ignore[index]


def test_default_table_fresh_instances():
    """Test that each call returns an independent value."""
    first = default_table()
    second = default_table()

    assert first == second
    assert first is not second


def test_parse_table():
    """Test parsing a valid mapping document."""
    table = parse_table('{"а": "a", "Щ": "SHCH", "ь": null, "ъ": ""}')

    assert dict(table) == {"а": "a", "Щ": "SHCH", "ь": "", "ъ": ""}


def test_parse_table_duplicate_keys_last_wins():
    """Test that later duplicate keys overwrite earlier ones."""
    table = parse_table('{"а": "a", "а": "aa"}')
    assert dict(table) == {"а": "aa"}


def test_parse_table_empty_object():
    """Test that an empty object gives an empty table."""
    assert dict(parse_table("{}")) == {}


def test_parse_table_is_read_only():
    """Test that parsed tables cannot be mutated."""
    table = parse_table('{"а": "a"}')

    with pytest.raises(TypeError):
        table["б"] = "b"  # type: ignore[index]


@pytest.mark.parametrize("source", ["", "   \n", "null", "{not json", "[]", '["а"]', '"а"'])
def test_parse_table_invalid_source(source):
    """Test that empty or malformed sources are rejected."""
    with pytest.raises(FormatError):
        parse_table(source)


@pytest.mark.parametrize("source", ['{"аб": "ab"}', '{"": "x"}', '{"а": "a", "sh": "ш"}'])
def test_parse_table_rejects_bad_keys(source):
    """Test that keys must be exactly one character."""
    with pytest.raises(FormatError, match="exactly one character"):
        parse_table(source)


@pytest.mark.parametrize("source", ['{"а": 1}', '{"а": ["a"]}', '{"а": {"b": "c"}}'])
def test_parse_table_rejects_non_string_values(source):
    """Test that values must be strings or null."""
    with pytest.raises(FormatError):
        parse_table(source)


def test_format_error_is_value_error():
    """Test that FormatError can be caught as ValueError."""
    with pytest.raises(ValueError):
        parse_table("")


def test_load_table(temp_dir):
    """Test loading a table from a file."""
    path = temp_dir / "map.json"
    path.write_text(json.dumps({"ж": "j", "Ж": "J"}, ensure_ascii=False), encoding="utf-8")

    table = load_table(path)

    assert dict(table) == {"ж": "j", "Ж": "J"}


def test_load_table_with_bom(temp_dir):
    """Test that a UTF-8 byte order mark is tolerated."""
    path = temp_dir / "map.json"
    path.write_text('{"ж": "zh"}', encoding="utf-8-sig")

    assert dict(load_table(path)) == {"ж": "zh"}


def test_load_table_missing_file(temp_dir):
    """Test that I/O errors propagate unchanged."""
    with pytest.raises(FileNotFoundError):
        load_table(temp_dir / "missing.json")


def test_write_table_round_trip(temp_dir):
    """Test that exporting and reloading the default table is lossless."""
    path = temp_dir / "default.json"
    write_table(path, default_table())

    reloaded = load_table(path)

    assert dict(reloaded) == dict(DEFAULT_PAIRS)
    assert json.loads(path.read_text(encoding="utf-8")) == table_to_dict(default_table())


def test_write_table_is_indented_and_readable(temp_dir):
    """Test that exported JSON is indented and keeps Cyrillic literal."""
    path = temp_dir / "default.json"
    write_table(path, default_table())

    content = path.read_text(encoding="utf-8")

    assert '\n  "А": "A"' in content
    assert "\\u" not in content


@pytest.mark.parametrize(
    "source",
    ['{"а": "a\\nb"}', '{"а": "a\\r"}', '{"а": "\\u2028"}', '{"а": "ok", "б": "b\\r\\n"}'],
)
def test_parse_table_rejects_line_breaks_in_values(source):
    """Test that a value cannot split one line into several."""
    with pytest.raises(FormatError, match="without line breaks"):
        parse_table(source)


def test_parse_table_allows_tabs_and_spaces():
    """Test that other whitespace in values is fine."""
    table = parse_table('{"а": "a\\t", "б": " b "}')
    assert dict(table) == {"а": "a\t", "б": " b "}
