"""
Run with: python -m numberinput
"""
from __future__ import annotations

import sys

from numberinput.app.application import create_app
from numberinput.app.ui.main_window import MainWindow


def main() -> int:
    """Main entry point for the application."""
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
