from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

ORG_ID = "attitudegauge"
APP_ID = "attitude-gauge"

VISIBLE_APP_NAME = "Attitude Gauge"

DEFAULT_WINDOW_SIZE = (520, 420)


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (reuses an existing one)."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv if argv is None else argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
