"""Command-line interface for figsync.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Export to a file or stdout for any scope
- File info summaries
- JSON-lines request loop for driving an export session
- Snapshot or REST API document sources
"""

from figsync.cli.app import cli, main

__all__ = ["cli", "main"]
