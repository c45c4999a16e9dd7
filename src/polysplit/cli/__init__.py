"""Command-line interface for polysplit.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Inline WKT or WKT file input
- Table of part areas and shares
- Verbose/quiet output modes
- Detailed error reporting
"""

from polysplit.cli.app import cli, main

__all__ = ["cli", "main"]
