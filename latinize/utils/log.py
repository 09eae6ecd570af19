"""Logging setup for the latinize command."""

import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


LOGGER_NAME = "latinize"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("pretty", "json")


def summary_extra(summary: Any) -> dict[str, Any]:
    """
    Build ``extra`` for a log call that carries a run summary.

    Args:
        summary: Dataclass instance (e.g. a ConversionResult) or mapping

    Returns:
        Dict suitable for the ``extra`` argument of logging calls
    """
    if is_dataclass(summary) and not isinstance(summary, type):
        fields = asdict(summary)
    else:
        fields = dict(summary)
    return {"summary": fields}


class JSONFormatter(logging.Formatter):
    """One JSON object per record; summaries are nested under ``summary``."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        summary = getattr(record, "summary", None)
        if summary:
            log_data["summary"] = summary

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class PrettyFormatter(logging.Formatter):
    """Human-readable lines; summary counters are appended as key=value."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        summary = getattr(record, "summary", None)
        if not summary:
            return text

        # Paths are already in the message
        counters = " ".join(
            f"{key}={value}" for key, value in summary.items() if not key.endswith("_path")
        )
        return f"{text} ({counters})" if counters else text


def setup_logging(
    level: str = "WARNING",
    format_type: str = "pretty",
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Configure the ``latinize`` logger.

    Console output goes to stderr so it never mixes with command output.
    The optional log file always receives JSON lines.

    Args:
        level: One of LOG_LEVELS (case-insensitive)
        format_type: One of LOG_FORMATS
        log_file: Optional log file path

    Returns:
        The configured ``latinize`` logger

    Raises:
        ValueError: If level or format_type is unknown
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    if format_type not in LOG_FORMATS:
        raise ValueError(
            f"unknown log format {format_type!r}, expected one of {', '.join(LOG_FORMATS)}"
        )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JSONFormatter() if format_type == "json" else PrettyFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger
