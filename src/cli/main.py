"""
Launcher for the planetas desktop app.

Usage
─────
  python -m src                        # default database
  python -m src --db ./planetas.db     # explicit database file
  planetas --debug                     # via pyproject.toml [project.scripts]

The parser is built by build_parser() so option handling can be unit-tested
without starting Qt.
"""

import argparse
import logging
import sys
from typing import Optional

from src.store.db import DEFAULT_DB_PATH

__all__ = ["build_parser", "configure_logging", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the launcher's argument parser."""
    parser = argparse.ArgumentParser(
        prog="planetas",
        description="Local catalogue of planets",
    )
    parser.add_argument(
        "--db",
        default=DEFAULT_DB_PATH,
        metavar="PATH",
        help=f"SQLite database path (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )
    return parser


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point. Returns the Qt event loop's exit code."""
    ns = build_parser().parse_args(argv)
    configure_logging(ns.debug)

    # Qt is imported lazily so --help works without a display
    from PyQt6.QtWidgets import QApplication
    from src.gui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv[:1])
    window = MainWindow(db_path=ns.db)
    window.show()
    logger.info("planetas started (db=%s)", ns.db)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
