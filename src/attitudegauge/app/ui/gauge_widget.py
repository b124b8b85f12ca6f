from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from PySide6.QtCore import QSize, Slot
from PySide6.QtGui import QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from attitudegauge.gauge import AttitudeGauge
from attitudegauge.surface.qt import QImageSurface

logger = logging.getLogger(__name__)


class GaugeWidget(QWidget):
    """
    Qt host for an AttitudeGauge.

    The gauge renders into an off-screen QImageSurface the size of the widget;
    `paintEvent` only blits that buffer. On resize the buffer is reacquired
    and re-bound to the gauge.
    """
    def __init__(self, options: Optional[Mapping[str, Any]] = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(160, 160)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self._surface = QImageSurface(max(1, self.width()), max(1, self.height()))
        self.gauge = AttitudeGauge.create(self._surface, options)
        self._redraw()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def surface(self) -> QImageSurface:
        return self._surface

    @Slot(float, float)
    def set_attitude(self, yaw: float, pitch: float) -> None:
        """Clamp and apply a new attitude, then repaint."""
        self.gauge.set_yaw(yaw)
        self.gauge.set_pitch(pitch)
        self._redraw()
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(300, 300)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self._surface.release()
        self._surface = QImageSurface(max(1, size.width()), max(1, size.height()))
        self.gauge.bind(self._surface)
        self._redraw()
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self._surface.image)
        painter.end()

    def _redraw(self) -> None:
        self.gauge.draw()
