"""
Qt Surfaces
===========
Raster drawing surfaces backed by PySide6's QPainter.

Classes:
    QPainterSurface: Issues drawing commands on an externally managed, active QPainter.
    QImageSurface: Owns a transparent QImage and opens a QPainter on it for each frame.
"""
from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QBrush, QColor, QFont, QFontMetricsF, QGuiApplication, QImage, QLinearGradient, QPainter, QPainterPath, QPen,
)

from attitudegauge.errors import SurfaceError
from attitudegauge.surface.base import Font, LinearGradient, Style, Surface
from attitudegauge.surface.registry import register_surface

logger = logging.getLogger(__name__)

# QGradient keeps one color per offset; a repeated offset is moved by this much
_STOP_EPSILON = 1e-6


def to_qcolor(color: str) -> QColor:
    qcolor = QColor(color)
    if not qcolor.isValid():
        raise SurfaceError(f"Unsupported color '{color}'")
    return qcolor


def to_qbrush(style: Style) -> QBrush:
    """Convert a color string or LinearGradient into a QBrush."""
    if isinstance(style, LinearGradient):
        gradient = QLinearGradient(style.x0, style.y0, style.x1, style.y1)
        last = -1.0
        for offset, color in style.stops:
            if offset <= last:
                offset = min(1.0, last + _STOP_EPSILON)
            gradient.setColorAt(offset, to_qcolor(color))
            last = offset
        return QBrush(gradient)
    return QBrush(to_qcolor(style))


class QPainterSurface(Surface):
    """
    Surface on top of a QPainter the caller has already begun.

    The surface does not own the painter: it never calls `begin()`/`end()`.
    It stays valid while the painter is active.
    """
    KEY = "qpainter"

    def __init__(self, painter: QPainter | None, width: float, height: float) -> None:
        self._painter = painter
        self._width = width
        self._height = height
        self._path = QPainterPath()

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def painter(self) -> QPainter | None:
        return self._painter

    def is_valid(self) -> bool:
        return self._painter is not None and self._painter.isActive()

    def _active_painter(self) -> QPainter:
        if self._painter is None or not self._painter.isActive():
            raise SurfaceError("No active QPainter on this surface")
        return self._painter

    # ---- transform ----

    def save(self) -> None:
        self._active_painter().save()

    def restore(self) -> None:
        self._active_painter().restore()

    def translate(self, dx: float, dy: float) -> None:
        self._active_painter().translate(dx, dy)

    def rotate(self, degrees: float) -> None:
        self._active_painter().rotate(degrees)

    # ---- painting ----

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        painter = self._active_painter()
        painter.save()
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        painter.fillRect(QRectF(x, y, width, height), Qt.GlobalColor.transparent)
        painter.restore()

    def begin_path(self) -> None:
        self._path = QPainterPath()

    def move_to(self, x: float, y: float) -> None:
        self._path.moveTo(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._path.lineTo(x, y)

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        # Qt measures arcs counter-clockwise in degrees; the surface API is clockwise radians
        rect = QRectF(cx - radius, cy - radius, 2 * radius, 2 * radius)
        start_deg = -math.degrees(start)
        sweep_deg = -math.degrees(end - start)
        sweep_deg = max(-360.0, min(360.0, sweep_deg))
        if self._path.elementCount() == 0:
            self._path.arcMoveTo(rect, start_deg)
        self._path.arcTo(rect, start_deg, sweep_deg)

    def stroke(self, style: Style, width: float = 1.0) -> None:
        pen = QPen(to_qbrush(style), width, Qt.PenStyle.SolidLine, Qt.PenCapStyle.FlatCap)
        self._active_painter().strokePath(self._path, pen)

    def fill(self, style: Style) -> None:
        self._active_painter().fillPath(self._path, to_qbrush(style))

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        color: str,
        font: Font = Font(),
        align: str = "center",
    ) -> None:
        painter = self._active_painter()
        if QGuiApplication.instance() is None:
            raise SurfaceError("Cannot render text without a QGuiApplication")
        qfont = QFont(font.family)
        qfont.setPixelSize(font.pixel_size)
        advance = QFontMetricsF(qfont).horizontalAdvance(text)
        if align == "center":
            x -= advance / 2
        elif align == "right":
            x -= advance
        painter.save()
        painter.setFont(qfont)
        painter.setPen(to_qcolor(color))
        painter.drawText(QPointF(x, y), text)
        painter.restore()


@register_surface
class QImageSurface(QPainterSurface):
    """
    Off-screen raster surface owning a transparent ARGB QImage.

    A QPainter is opened on the image only for the duration of `frame()`, so
    the image can be read (blitted, saved) between frames.
    """
    KEY = "qimage"

    def __init__(self, width: int, height: int) -> None:
        super().__init__(None, width, height)
        self._image = QImage(int(width), int(height), QImage.Format.Format_ARGB32_Premultiplied)
        self._image.fill(Qt.GlobalColor.transparent)
        self._released = False

    @property
    def image(self) -> QImage:
        return self._image

    def is_valid(self) -> bool:
        # Text layout needs the font database, which only exists with a GUI application
        return self._has_image() and QGuiApplication.instance() is not None

    def _has_image(self) -> bool:
        return not self._released and not self._image.isNull()

    @contextmanager
    def frame(self) -> Iterator[QImageSurface]:
        if not self._has_image():
            raise SurfaceError("QImage surface has been released")
        if QGuiApplication.instance() is None:
            raise SurfaceError("A QGuiApplication must exist before painting on a QImage surface")
        painter = QPainter()
        if not painter.begin(self._image):
            raise SurfaceError("Could not begin painting on QImage")
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        self._painter = painter
        try:
            yield self
        finally:
            painter.end()
            self._painter = None

    def release(self) -> None:
        """Drop the backing image. The surface cannot be drawn on afterwards."""
        if self._painter is not None and self._painter.isActive():
            self._painter.end()
        self._painter = None
        self._image = QImage()
        self._released = True
        logger.debug("QImage surface released")

    def save_png(self, path: str | Path) -> None:
        if not self._has_image():
            raise SurfaceError("Cannot save a released QImage surface")
        if not self._image.save(str(path), "PNG"):
            raise SurfaceError(f"Could not write image to '{path}'")
        logger.info(f"Gauge image saved to: {path}")
