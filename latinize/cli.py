"""latinize CLI - Main entry point."""

import sys
from pathlib import Path
from typing import NoReturn

import click
import yaml  # type: ignore[import-untyped]

from latinize.config import load_settings
from latinize.convert import convert_file
from latinize.mapping import default_table, load_table, write_table
from latinize.utils.log import setup_logging


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG = """
\b
Map format example (JSON, one character per key):
{
  "Ё": "Yo",
  "Щ": "Shch",
  "ь": "",
  "я": "ya"
}
\b
A custom map replaces the default entirely: characters it does not list
are copied unchanged. Lines such as [ar:Artist] are never changed.
"""


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.argument("input_path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.argument("output_path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--map",
    "map_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Use a custom 33-letter transliteration map in JSON.",
)
@click.option(
    "--write-default-map",
    "default_map_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Export default map JSON so you can edit it.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings YAML (default: etc/settings.yaml).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: Path | None,
    output_path: Path | None,
    map_path: Path | None,
    default_map_path: Path | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Transliterate Cyrillic lyric files (.lrc) to Latin script.

    Reads INPUT_PATH and writes the transliterated text to OUTPUT_PATH.
    """
    if not any((input_path, output_path, map_path, default_map_path, config_path, verbose)):
        click.echo(ctx.get_help())
        return

    try:
        settings = load_settings(config_path)
        log_settings = settings["logging"]
        logger = setup_logging(
            level="DEBUG" if verbose else log_settings["level"],
            format_type=log_settings["format"],
            log_file=log_settings["file"],
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        _fail(str(e))

    if default_map_path is not None:
        try:
            write_table(default_map_path, default_table())
        except Exception as e:
            logger.error(f"Writing default map failed: {e}", exc_info=True)
            _fail(str(e))

        click.echo(f"Default map written to: {default_map_path}")

        if input_path is None:
            return

    if input_path is None or output_path is None:
        click.echo(
            "Error: input and output paths are required unless only writing default map.",
            err=True,
        )
        click.echo(ctx.get_help())
        sys.exit(1)

    try:
        table = load_table(map_path) if map_path is not None else default_table()
        convert_file(
            input_path,
            output_path,
            table,
            logger,
            show_progress=bool(settings.get("progress", False)),
        )
    except Exception as e:
        logger.error(f"Transliteration failed: {e}", exc_info=True)
        _fail(str(e))

    click.echo(f"Transliteration completed: {output_path}")


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
