"""
Run with: python -m attitudegauge.app.main
"""
from __future__ import annotations

import logging
import sys

from attitudegauge.app.application import create_app
from attitudegauge.app.ui.main_window import MainWindow
from attitudegauge.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=logging.INFO)
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
