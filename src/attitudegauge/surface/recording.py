"""
Recording Surface
=================
A display-list backend: every drawing call is appended to `commands` instead
of being rasterized.

Used for headless rendering checks, where the exact sequence of primitives
matters more than pixels.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from attitudegauge.errors import SurfaceError
from attitudegauge.surface.base import Font, Style, Surface
from attitudegauge.surface.registry import register_surface


@dataclass(frozen=True)
class DrawCommand:
    op: str
    args: tuple[Any, ...] = ()


@register_surface
class RecordingSurface(Surface):
    KEY = "recording"

    def __init__(self, width: float, height: float) -> None:
        self._width = width
        self._height = height
        self._valid = True
        self._depth = 0
        self.commands: list[DrawCommand] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def is_valid(self) -> bool:
        return self._valid

    def invalidate(self) -> None:
        """Mark the surface as detached; further drawing raises SurfaceError."""
        self._valid = False

    def clear_commands(self) -> None:
        self.commands.clear()

    def ops(self) -> list[str]:
        return [c.op for c in self.commands]

    def find(self, op: str) -> list[DrawCommand]:
        return [c for c in self.commands if c.op == op]

    def _record(self, op: str, *args: Any) -> None:
        if not self._valid:
            raise SurfaceError(f"Cannot '{op}' on a detached recording surface")
        self.commands.append(DrawCommand(op, args))

    # ---- transform ----

    def save(self) -> None:
        self._depth += 1
        self._record("save")

    def restore(self) -> None:
        if self._depth == 0:
            raise SurfaceError("restore() without matching save()")
        self._depth -= 1
        self._record("restore")

    def translate(self, dx: float, dy: float) -> None:
        self._record("translate", float(dx), float(dy))

    def rotate(self, degrees: float) -> None:
        self._record("rotate", float(degrees))

    # ---- painting ----

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("clear_rect", float(x), float(y), float(width), float(height))

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", float(x), float(y))

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", float(x), float(y))

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        self._record("arc", float(cx), float(cy), float(radius), float(start), float(end))

    def stroke(self, style: Style, width: float = 1.0) -> None:
        self._record("stroke", style, float(width))

    def fill(self, style: Style) -> None:
        self._record("fill", style)

    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        color: str,
        font: Font = Font(),
        align: str = "center",
    ) -> None:
        self._record("fill_text", text, float(x), float(y), color, font, align)
