"""Latinize lyric files by per-character transliteration."""

from latinize.mapping import FormatError, default_table, load_table, parse_table
from latinize.transform import is_tag_line, transliterate_line, transliterate_lines


__version__ = "0.1.0"

__all__ = [
    "FormatError",
    "default_table",
    "is_tag_line",
    "load_table",
    "parse_table",
    "transliterate_line",
    "transliterate_lines",
]
