"""I/O utilities with atomic writes and safe file operations."""

import json
import os
import shutil
import tempfile
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any


# Input files may start with a byte order mark (common for .lrc exports)
READ_ENCODING = "utf-8-sig"
WRITE_ENCODING = "utf-8"


def _target_mode(path: Path) -> int:
    """
    File mode for a finished write.

    An existing destination keeps its mode; a new file gets the usual
    ``0o666`` filtered through the process umask.
    """
    if path.exists():
        return path.stat().st_mode & 0o7777

    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write(
    path: Path,
    write_func: Callable[[Path], None],
) -> None:
    """
    Atomically write to a file using temp file and move.

    The destination is only replaced once ``write_func`` has finished, so a
    failure leaves any existing file untouched.

    Args:
        path: Destination path
        write_func: Function that writes to a given path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Create temp file in same directory (ensures same filesystem)
    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        delete=False,
        prefix=f".tmp.{path.name}.",
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)

    try:
        write_func(tmp_path)
        os.chmod(tmp_path, _target_mode(path))
        shutil.move(str(tmp_path), str(path))
    except Exception:
        # Clean up temp file on failure
        tmp_path.unlink(missing_ok=True)
        raise


def read_text(path: Path) -> str:
    """
    Read a whole UTF-8 text file.

    Args:
        path: Path to text file

    Returns:
        File contents with newlines normalized to ``\\n``
    """
    with Path(path).open("r", encoding=READ_ENCODING) as f:
        return f.read()


def read_lines(path: Path) -> list[str]:
    """
    Read a UTF-8 text file into a list of lines without terminators.

    A final line terminator does not produce an extra empty line, so
    ``"a\\nb\\n"`` and ``"a\\nb"`` both read as two lines.

    Args:
        path: Path to text file

    Returns:
        List of lines
    """
    content = read_text(path)
    if not content:
        return []

    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def write_lines(path: Path, lines: Iterable[str]) -> int:
    """
    Write lines atomically, each followed by the platform line separator.

    Args:
        path: Destination path
        lines: Lines without terminators

    Returns:
        Number of lines written
    """
    count = 0

    def _write(tmp_path: Path) -> None:
        nonlocal count
        with tmp_path.open("w", encoding=WRITE_ENCODING) as f:
            for line in lines:
                f.write(line + "\n")
                count += 1

    atomic_write(path, _write)
    return count


def write_json(path: Path, data: Any, indent: int = 2) -> None:
    """
    Write JSON file atomically.

    Args:
        path: Destination path
        data: Data to serialize
        indent: JSON indentation
    """

    def _write(tmp_path: Path) -> None:
        with tmp_path.open("w", encoding=WRITE_ENCODING) as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)

    atomic_write(path, _write)

