"""Line-level transliteration with metadata tag protection."""

import re
from collections.abc import Iterable

from latinize.mapping import MappingTable


# Metadata tag lines like [ar:...], [ti:...], [by:...]
TAG_LINE_RE = re.compile(r"\[[A-Za-z]+:.*\]")


def is_tag_line(line: str) -> bool:
    """
    Check whether a whole line is a metadata tag.

    The match is anchored on both ends: surrounding whitespace or any text
    after the closing bracket disqualifies the line.

    Args:
        line: Line without terminator

    Returns:
        True if the line is a metadata tag
    """
    return TAG_LINE_RE.fullmatch(line) is not None


def substitute(text: str, table: MappingTable) -> str:
    """Replace every character that has a table entry, ignoring tags."""
    return "".join(table.get(char, char) for char in text)


def transliterate_line(line: str, table: MappingTable) -> str:
    """
    Transliterate a single line.

    Args:
        line: Line without terminator
        table: Character mapping table

    Returns:
        The line unchanged if it is a metadata tag, otherwise each character
        replaced by its table entry (or kept when it has none)
    """
    if is_tag_line(line):
        return line

    return substitute(line, table)


def transliterate_lines(lines: Iterable[str], table: MappingTable) -> list[str]:
    """Transliterate lines independently, preserving order."""
    return [transliterate_line(line, table) for line in lines]
