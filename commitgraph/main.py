#!/usr/bin/env python3
"""
commitgraph - interactive commit graph viewer for git repositories
"""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from commitgraph.config.settings import Settings
from commitgraph.git_backend.repository import GraphRepository
from commitgraph.ui.main_window import MainWindow


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="commitgraph",
        description="commitgraph - interactive commit graph viewer",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Repository to open (default: the one containing the current directory)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Number of commits to load initially (default: history.page_size setting)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Commit Graph")
    app.setOrganizationName("commitgraph")

    try:
        repo = GraphRepository(args.path)
    except ValueError as e:
        QMessageBox.critical(None, "Git Repository Required", str(e))
        sys.exit(1)

    window = MainWindow(repo, Settings(), limit=args.limit)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
