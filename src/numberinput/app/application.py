from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os

from numberinput.config import LOG_FILE, LOG_LEVEL
from numberinput.logging_config import setup_logging

ORG_ID = "the-a-5995"
APP_ID = "number-input"
ORG_DOMAIN = "the-a-5995.com"

VISIBLE_ORG_NAME = "THE A 5995"
VISIBLE_APP_NAME = "Listing Editor"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
