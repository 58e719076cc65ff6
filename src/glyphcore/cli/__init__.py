"""Command-line interface for glyphcore.

This module provides the CLI using Typer with rich output for
inspecting decoded fonts.

Key features:
- Table directory and font metrics overview
- Per-character outline dumps (text or JSON)
- Load failures reported as clean error messages
"""

from glyphcore.cli.app import cli, main

__all__ = ["cli", "main"]
