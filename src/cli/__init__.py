"""
cli — command-line launcher for planetas.

Entry points
────────────
  python -m src   (via src/__main__.py)
  planetas        (via pyproject.toml [project.scripts])
"""

from src.cli.main import build_parser, configure_logging, main

__all__ = ["build_parser", "configure_logging", "main"]
