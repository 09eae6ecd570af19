"""Character mapping tables for transliteration."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from latinize.utils.io import read_text, write_json
from latinize.utils.schema import validate_mapping


logger = logging.getLogger(__name__)

MappingTable = Mapping[str, str]

# Russian alphabet romanization (33 letters, upper then lower case)
DEFAULT_PAIRS: tuple[tuple[str, str], ...] = (
    ("А", "A"), ("Б", "B"), ("В", "V"), ("Г", "G"), ("Д", "D"), ("Е", "E"),
    ("Ё", "Yo"), ("Ж", "Zh"), ("З", "Z"), ("И", "I"), ("Й", "Y"), ("К", "K"),
    ("Л", "L"), ("М", "M"), ("Н", "N"), ("О", "O"), ("П", "P"), ("Р", "R"),
    ("С", "S"), ("Т", "T"), ("У", "U"), ("Ф", "F"), ("Х", "Kh"), ("Ц", "Ts"),
    ("Ч", "Ch"), ("Ш", "Sh"), ("Щ", "Shch"), ("Ъ", ""), ("Ы", "Y"), ("Ь", ""),
    ("Э", "E"), ("Ю", "Yu"), ("Я", "Ya"),
    ("а", "a"), ("б", "b"), ("в", "v"), ("г", "g"), ("д", "d"), ("е", "e"),
    ("ё", "yo"), ("ж", "zh"), ("з", "z"), ("и", "i"), ("й", "y"), ("к", "k"),
    ("л", "l"), ("м", "m"), ("н", "n"), ("о", "o"), ("п", "p"), ("р", "r"),
    ("с", "s"), ("т", "t"), ("у", "u"), ("ф", "f"), ("х", "kh"), ("ц", "ts"),
    ("ч", "ch"), ("ш", "sh"), ("щ", "shch"), ("ъ", ""), ("ы", "y"), ("ь", ""),
    ("э", "e"), ("ю", "yu"), ("я", "ya"),
)


class FormatError(ValueError):
    """Raised when a mapping source cannot be turned into a table."""


def default_table() -> MappingTable:
    """
    Build the built-in Russian to Latin table.

    Returns:
        A new read-only table with the 66 default entries
    """
    return MappingProxyType(dict(DEFAULT_PAIRS))


def parse_table(source: str) -> MappingTable:
    """
    Parse a JSON mapping document into a table.

    Keys must be exactly one character; values are strings without line
    breaks (so output keeps one line per input line), with ``null``
    treated as the empty string. Duplicate keys are allowed and the last
    occurrence wins.

    Args:
        source: JSON text of a flat object

    Returns:
        Read-only mapping table

    Raises:
        FormatError: If the source is empty, not valid JSON, not an object,
            contains a key that is not a single character, or a value that
            is not a string, null, or contains a line break
    """
    if not source or not source.strip():
        raise FormatError("Map JSON is empty or invalid.")

    try:
        raw: Any = json.loads(source)
    except json.JSONDecodeError as e:
        raise FormatError(f"Map JSON is empty or invalid: {e}") from e

    if raw is None:
        raise FormatError("Map JSON is empty or invalid.")

    errors = validate_mapping(raw)
    if errors:
        raise FormatError(
            "Invalid map: "
            + "; ".join(errors)
            + ". Each key must be exactly one character and each value a string"
            + " without line breaks."
        )

    table = {key: value if value is not None else "" for key, value in raw.items()}
    logger.debug(f"Parsed mapping table with {len(table)} entries")
    return MappingProxyType(table)


def load_table(path: str | Path) -> MappingTable:
    """
    Load a mapping table from a JSON file.

    The loaded table replaces the default entirely; characters it does not
    list are left unchanged by the transformer.

    Args:
        path: Path to UTF-8 JSON file

    Returns:
        Read-only mapping table
    """
    path = Path(path)
    logger.info(f"Loading mapping table from {path}")
    return parse_table(read_text(path))


def table_to_dict(table: MappingTable) -> dict[str, str]:
    """Convert a table to a plain dict for JSON serialization."""
    return dict(table)


def write_table(path: str | Path, table: MappingTable, indent: int = 2) -> None:
    """
    Export a table as indented JSON.

    Args:
        path: Destination path
        table: Table to export
        indent: JSON indentation
    """
    write_json(Path(path), table_to_dict(table), indent=indent)
    logger.info(f"Wrote {len(table)} mapping entries to {path}")
