from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDockWidget, QMainWindow, QStatusBar

from attitudegauge.app.application import DEFAULT_WINDOW_SIZE, VISIBLE_APP_NAME
from attitudegauge.app.state import AttitudeStore
from attitudegauge.app.ui.gauge_widget import GaugeWidget
from attitudegauge.app.ui.panels.controls import ControlsPanel


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*DEFAULT_WINDOW_SIZE)

        # Global store
        self.store = AttitudeStore()

        self.gauge_widget = GaugeWidget(parent=self)
        self.setCentralWidget(self.gauge_widget)

        self.controls = ControlsPanel(self.store, parent=self)
        dock = QDockWidget(self.tr("Attitude"), self)
        dock.setObjectName("attitude_dock")
        dock.setFeatures(QDockWidget.DockWidgetFeature.NoDockWidgetFeatures)
        dock.setWidget(self.controls)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, dock)

        self.setStatusBar(QStatusBar(self))

        self.store.attitude_changed.connect(self.gauge_widget.set_attitude)
        self.store.attitude_changed.connect(self._show_attitude)
        self._show_attitude(self.store.yaw, self.store.pitch)

    def _show_attitude(self, yaw: float, pitch: float) -> None:
        gauge = self.gauge_widget.gauge
        self.statusBar().showMessage(
            self.tr("Yaw {0:.1f}°  Pitch {1:.1f}°").format(gauge.yaw, gauge.pitch)
        )
