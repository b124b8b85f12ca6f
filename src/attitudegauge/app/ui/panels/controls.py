from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout, QSizePolicy, QDoubleSpinBox,
)

from attitudegauge.app.state import AttitudeStore
from attitudegauge.app.ui.panels.base import BasePanel


class ControlsPanel(BasePanel):
    """
    Yaw/pitch inputs. Pushes every change into the store; the gauge widget
    listens to the store and does the clamping.
    """
    TITLE: str = "Attitude"

    def __init__(self, store: AttitudeStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        box = QGroupBox(self.tr(self.TITLE), self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(box)
        layout.addStretch()
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self._spins: dict[str, QDoubleSpinBox] = {}
        self._row = 0

        self._add_spin("yaw", "Yaw:", min_value=-720.0, max_value=720.0, step=1.0, default=store.yaw, suffix="°")
        self._add_spin("pitch", "Pitch:", min_value=-180.0, max_value=180.0, step=0.5, default=store.pitch, suffix="°")
        for w in self._spins.values():
            w.valueChanged.connect(self._relay_changed)

        self.store.attitude_changed.connect(self._sync_from_store)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_spin(
        self,
        key: str,
        label: str,
        *,
        min_value: float = -1e9,
        max_value: float = 1e9,
        step: float = 0.1,
        default: float = 0.0,
        suffix: str = "",
        decimals: int = 1
    ) -> QDoubleSpinBox:
        row = self._next_row()
        lab = QLabel(self.tr(label), self)
        self.grid.addWidget(lab, row, 0)
        w = QDoubleSpinBox(self)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        if suffix:
            w.setSuffix(f" {suffix}")
        self.grid.addWidget(w, row, 1)
        self._spins[key] = w
        return w

    def spin(self, key: str) -> QDoubleSpinBox:
        return self._spins[key]

    def params(self) -> dict[str, float]:
        return {k: w.value() for k, w in self._spins.items()}

    @Slot()
    def _relay_changed(self) -> None:
        p = self.params()
        self.store.set_attitude(p["yaw"], p["pitch"])

    @Slot(float, float)
    def _sync_from_store(self, yaw: float, pitch: float) -> None:
        for key, value in (("yaw", yaw), ("pitch", pitch)):
            w = self._spins[key]
            if w.value() != value:
                w.blockSignals(True)
                w.setValue(value)
                w.blockSignals(False)
