"""Command-line interface for wordgoal.

This module provides the CLI using Typer with rich output:

- Word counts with a goal bar tinted by progress
- Word goal, font size and focus mode preferences
- Window placement previews against a display layout
"""

from wordgoal.cli.app import cli, main

__all__ = ["cli", "main"]
