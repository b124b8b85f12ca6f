import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from attitudegauge.surface.recording import RecordingSurface  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def recording():
    return RecordingSurface(200, 200)
