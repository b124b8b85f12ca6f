from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class LinearGradient:
    """
    A linear gradient between two points in the current user frame.

    `stops` is an ordered tuple of (offset, color) pairs with offsets in
    [0, 1]. Two consecutive stops may share an offset to form a hard edge.
    """
    x0: float
    y0: float
    x1: float
    y1: float
    stops: tuple[tuple[float, str], ...] = ()


@dataclass(frozen=True)
class Font:
    family: str = "Arial"
    pixel_size: int = 12


# A solid color string (CSS-style, e.g. "#87CEEB") or a gradient
Style = Union[str, LinearGradient]


class Surface(ABC):
    """
    Canvas-style 2D drawing capability the gauge draws against.

    Coordinates are in pixels with y growing downwards. Paths are built with
    `begin_path`/`move_to`/`line_to`/`arc` and painted with `stroke`/`fill`.
    `save`/`restore` push and pop the transform.
    """
    KEY: str = "base"  # Override in subclass

    @property
    @abstractmethod
    def width(self) -> float: ...

    @property
    @abstractmethod
    def height(self) -> float: ...

    @abstractmethod
    def is_valid(self) -> bool:
        """False once the surface is detached/destroyed and cannot be drawn on."""

    @contextmanager
    def frame(self) -> Iterator[Surface]:
        """Bracket one full redraw. Backends that need a paint session override this."""
        yield self

    # ---- transform ----

    @abstractmethod
    def save(self) -> None: ...

    @abstractmethod
    def restore(self) -> None: ...

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None: ...

    @abstractmethod
    def rotate(self, degrees: float) -> None:
        """Rotate the user frame; positive angles turn clockwise on screen."""

    # ---- painting ----

    @abstractmethod
    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    @abstractmethod
    def begin_path(self) -> None: ...

    @abstractmethod
    def move_to(self, x: float, y: float) -> None: ...

    @abstractmethod
    def line_to(self, x: float, y: float) -> None: ...

    @abstractmethod
    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        """Add a clockwise arc from `start` to `end` (radians, 0 along +x)."""

    @abstractmethod
    def stroke(self, style: Style, width: float = 1.0) -> None: ...

    @abstractmethod
    def fill(self, style: Style) -> None: ...

    @abstractmethod
    def fill_text(
        self,
        text: str,
        x: float,
        y: float,
        color: str,
        font: Font = Font(),
        align: str = "center",
    ) -> None:
        """Draw `text` with its baseline at `y`, anchored at `x` per `align`."""
