"""
CLI submodule for the oajournal command-line interface.

- main.py: typer app, global options and the lookup command
- formatters.py: Rich table output
"""

from .main import app

__all__ = ["app"]
