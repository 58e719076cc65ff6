"""CLI application entry point for glyphcore.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from glyphcore import __version__
from glyphcore.cli.output import (
    console,
    print_error,
    print_font_info,
    print_glyph,
    print_header,
    print_step,
    print_success,
    print_table_directory,
)
from glyphcore.config import GlyphcoreSettings, LoggingConfig, ParsingConfig
from glyphcore.domain import LoadedFont
from glyphcore.exceptions import FontLoadError, FontParseError, GlyphcoreError
from glyphcore.io import FontReader
from glyphcore.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphcore",
    help="Decode TrueType outlines and character maps.",
    add_completion=False,
    no_args_is_help=True,
)

FontArgument = Annotated[
    Path,
    typer.Argument(help="Path to input TTF font file", show_default=False),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
RawOption = Annotated[
    bool,
    typer.Option("--raw", help="Keep TrueType points as stored, without implied points"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glyphcore[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Decode TrueType outlines and character maps."""


def _build_settings(log_level: str, log_file: Path | None, raw: bool) -> GlyphcoreSettings:
    try:
        return GlyphcoreSettings(
            parsing=ParsingConfig(normalize_contours=not raw),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1) from None


def _load(font_path: Path, settings: GlyphcoreSettings) -> LoadedFont:
    """Read and decode a font, turning failures into a clean exit."""
    if not font_path.is_file():
        print_error(
            f"Input file not found: {font_path}",
            details=f"The file '{font_path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        return FontReader(font_path, settings=settings, logger=logger).load()
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1) from None
    except FontParseError as e:
        print_error("Could not decode font", details=str(e))
        raise typer.Exit(code=1) from None
    except GlyphcoreError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def info(
    input_font: FontArgument,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
) -> None:
    """Show the table directory and font-wide metrics of a font."""
    settings = _build_settings(log_level, log_file, raw=False)
    print_header(__version__)
    print_step("Loading font")
    font = _load(input_font, settings)

    print_font_info(str(input_font), font)
    print_step("Tables")
    print_table_directory(font)
    print_success("Font decoded")


@app.command()
def glyph(
    input_font: FontArgument,
    text: Annotated[
        str,
        typer.Argument(help="Characters to look up", show_default=False),
    ],
    points: Annotated[
        bool,
        typer.Option("--points", "-p", help="List every point of each contour"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print outlines as JSON"),
    ] = False,
    raw: RawOption = False,
    log_level: LogLevelOption = "WARNING",
    log_file: LogFileOption = None,
) -> None:
    """Show the outline of each character in TEXT."""
    settings = _build_settings(log_level, log_file, raw)
    font = _load(input_font, settings)

    if as_json:
        result = []
        for char in text:
            glyph_id = font.glyph_id_for(ord(char))
            outline = font.glyph_for_codepoint(ord(char))
            result.append(
                {
                    "char": char,
                    "codepoint": ord(char),
                    "glyph_id": glyph_id,
                    "outline": outline.to_dict() if outline is not None else None,
                }
            )
        console.print_json(json.dumps(result))
        return

    print_header(__version__)
    print_font_info(str(input_font), font)
    for char in text:
        print_glyph(
            char,
            font.glyph_id_for(ord(char)),
            font.glyph_for_codepoint(ord(char)),
            points,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
