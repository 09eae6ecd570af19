"""Whole-file transliteration pipeline."""

import logging
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

from latinize.mapping import MappingTable
from latinize.transform import is_tag_line, substitute
from latinize.utils.io import read_lines, write_lines
from latinize.utils.log import summary_extra


@dataclass
class ConversionResult:
    """Result of converting one file."""

    input_path: str
    output_path: str
    total_lines: int
    tag_lines: int
    changed_lines: int


def convert_file(
    input_path: Path,
    output_path: Path,
    table: MappingTable,
    logger: logging.Logger,
    show_progress: bool = False,
) -> ConversionResult:
    """
    Transliterate a text file line by line.

    The whole input is read and transformed before the output is opened, and
    the output is written atomically, so a failure never leaves a partial file.

    Args:
        input_path: UTF-8 source file
        output_path: Destination file
        table: Character mapping table
        logger: Logger instance
        show_progress: Show a tqdm progress bar over lines

    Returns:
        Conversion statistics
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    lines = read_lines(input_path)
    logger.debug(f"Read {len(lines)} lines from {input_path}")

    output_lines: list[str] = []
    tag_lines = 0
    changed_lines = 0

    for line in tqdm(lines, desc="Transliterating", unit="line", disable=not show_progress):
        if is_tag_line(line):
            tag_lines += 1
            output_lines.append(line)
            continue

        converted = substitute(line, table)
        if converted != line:
            changed_lines += 1
        output_lines.append(converted)

    write_lines(output_path, output_lines)

    result = ConversionResult(
        input_path=str(input_path),
        output_path=str(output_path),
        total_lines=len(output_lines),
        tag_lines=tag_lines,
        changed_lines=changed_lines,
    )
    logger.info(f"Converted {input_path} -> {output_path}", extra=summary_extra(result))
    return result
