"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphcore.domain import GlyphOutline, LoadedFont

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]glyphcore[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font: LoadedFont) -> None:
    """Print font summary.

    Args:
        font_path: Path to the font file
        font: The decoded font
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    console.print(line)
    console.print(
        f"  {font.num_glyphs:,} glyphs {SYM_DOT} {font.units_per_em:,} UPM "
        f"{SYM_DOT} {len(font.codepoint_map):,} codepoints"
    )
    xmin, ymin, xmax, ymax = font.bounding_box
    console.print(f"  bbox ({xmin}, {ymin}) {SYM_DOT} ({xmax}, {ymax})")


def print_table_directory(font: LoadedFont) -> None:
    """Print the table directory as a table."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Tag")
    table.add_column("Offset", justify="right")
    table.add_column("Length", justify="right")
    for entry in font.tables:
        table.add_row(repr(entry.tag), f"{entry.offset:,}", f"{entry.length:,}")
    console.print(table)


def print_glyph(char: str, glyph_id: int | None, outline: GlyphOutline | None, points: bool) -> None:
    """Print one glyph's outline summary.

    Args:
        char: The character that was looked up
        glyph_id: Its glyph id, or None if unmapped
        outline: Its outline, or None if unmapped
        points: Whether to dump every point
    """
    label = f"U+{ord(char):04X} {char!r}"
    if glyph_id is None or outline is None:
        console.print(f"\n  {label} [yellow]not mapped[/yellow]")
        return

    xmin, ymin, xmax, ymax = outline.bounding_box
    kind = "composite" if outline.is_composite else f"{len(outline.contours)} contours"
    console.print(
        f"\n  {label} {SYM_DOT} glyph {glyph_id} {SYM_DOT} {kind} {SYM_DOT} "
        f"bbox ({xmin}, {ymin}, {xmax}, {ymax})"
    )
    for index, contour in enumerate(outline.contours):
        on_curve = sum(1 for p in contour if p.on_curve)
        console.print(
            f"    contour {index}: {len(contour)} points "
            f"({on_curve} on {SYM_DOT} {len(contour) - on_curve} off)"
        )
        if points:
            for p in contour:
                marker = "●" if p.on_curve else "○"
                console.print(f"      {marker} {p.x:g}, {p.y:g}")


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
