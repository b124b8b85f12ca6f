"""
Attitude Gauge
==============
Renders an aircraft-style attitude/heading indicator from a yaw and a pitch
angle onto any `Surface`.

Layering (later steps paint over earlier ones):
    1. clear the surface
    2. outer circle
    3. dynamic horizon (rotated by yaw, shifted by pitch)
    4. fixed heading ring and pitch ladder
    5. fixed aircraft reference marker

The gauge never triggers a redraw by itself: callers set the angles and then
call `draw()`.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from attitudegauge.config import GaugeConfig, with_defaults
from attitudegauge.errors import ConfigurationError, SurfaceError
from attitudegauge.model.geometry_utils import (
    compass_points, minor_heading_angles, normalize_yaw, pitch_scale, pitch_to_offset,
)
from attitudegauge.model.state import GaugeState
from attitudegauge.surface.base import Font, LinearGradient, Surface

logger = logging.getLogger(__name__)

# Space reserved around the dial for the heading labels (px)
DIAL_MARGIN = 20.0

LADDER_LINE_LENGTH = 20.0
LADDER_LABEL_GAP = 15.0
LADDER_LABEL_BASELINE = 4.0
LADDER_FONT = Font("Arial", 12)

CARDINAL_HEADINGS = ((0, "N"), (90, "E"), (180, "S"), (270, "W"))
CARDINAL_TICK_LENGTH = 15.0
HEADING_TEXT_OFFSET = 25.0
MINOR_TICK_LENGTH = 10.0
MINOR_TICK_STEP = 30
HEADING_LABEL_BASELINE = 5.0
HEADING_FONT = Font("Arial", 14)

MARKER_PITCH_DEG = 1.0
MARKER_WING_INNER = 10.0
MARKER_WING_OUTER = 50.0
MARKER_WING_COLOR = "#f00"
MARKER_CENTER_COLOR = "#ff0"
MARKER_CENTER_HALF_LENGTH = 2.0


def dial_radius(center_x: float, center_y: float) -> float:
    """Radius of the dial, never negative on surfaces smaller than the label margin."""
    return max(0.0, min(center_x, center_y) - DIAL_MARGIN)


class AttitudeGauge:
    """
    Attitude/heading indicator bound to a drawing surface.

    Holds the configuration and the clamped (yaw, pitch) state. `draw()` is a
    pure function of both: the same state always produces the same sequence
    of drawing calls.
    """

    def __init__(self, surface: Surface, config: Optional[GaugeConfig] = None) -> None:
        self._surface = self._check_surface(surface)
        self._config = config if config is not None else GaugeConfig()
        self._state = GaugeState()

    @classmethod
    def create(cls, surface: Surface, options: Optional[Mapping[str, Any]] = None) -> AttitudeGauge:
        """
        Build a gauge with `options` merged over the default configuration.

        Raises:
            ConfigurationError: If the surface is missing/invalid or an option is invalid.
        """
        return cls(surface, with_defaults(options))

    @staticmethod
    def _check_surface(surface: Surface) -> Surface:
        if surface is None:
            raise ConfigurationError("A drawing surface is required")
        if not isinstance(surface, Surface):
            raise ConfigurationError(f"Expected a Surface, got {type(surface).__name__}")
        if not surface.is_valid():
            raise ConfigurationError("The drawing surface is not usable")
        return surface

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def config(self) -> GaugeConfig:
        return self._config

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def yaw(self) -> float:
        return self._state.yaw

    @property
    def pitch(self) -> float:
        return self._state.pitch

    def bind(self, surface: Surface) -> None:
        """Attach a (re)acquired surface, e.g. after a SurfaceError or a resize."""
        self._surface = self._check_surface(surface)
        logger.debug(f"Gauge bound to surface {surface.width}x{surface.height}")

    def set_yaw(self, angle: float) -> None:
        """Store `angle` clamped into [min_angle, max_angle]. Does not redraw."""
        self._state.set_yaw(angle, self._config.min_angle, self._config.max_angle)

    def set_pitch(self, angle: float) -> None:
        """Store `angle` clamped into [min_pitch, max_pitch]. Does not redraw."""
        self._state.set_pitch(angle, self._config.min_pitch, self._config.max_pitch)

    def draw(self) -> None:
        """
        Clear the surface and repaint the whole gauge.

        Raises:
            SurfaceError: If the surface became invalid or a drawing call failed.
        """
        surface = self._surface
        if not surface.is_valid():
            raise SurfaceError("Cannot draw: the surface is no longer valid")

        logger.debug(
            f"Drawing gauge yaw={self._state.yaw:.2f} pitch={self._state.pitch:.2f} "
            f"on {surface.width}x{surface.height}"
        )
        try:
            with surface.frame():
                surface.clear_rect(0, 0, surface.width, surface.height)
                center_x = surface.width / 2
                center_y = surface.height / 2
                radius = dial_radius(center_x, center_y)

                self._draw_outer_circle(surface, center_x, center_y, radius)
                self._draw_dynamic_horizon(surface, center_x, center_y, radius)
                self._draw_fixed_indicators(surface, center_x, center_y, radius)
                self._draw_fixed_markers(surface, center_x, center_y)
        except SurfaceError:
            raise
        except RuntimeError as e:
            # e.g. the Qt object behind the surface was deleted
            raise SurfaceError(f"Drawing failed: {e}") from e

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _draw_outer_circle(self, surface: Surface, center_x: float, center_y: float, radius: float) -> None:
        surface.begin_path()
        surface.arc(center_x, center_y, radius, 0, math.pi * 2)
        surface.stroke(self._config.scale_color, 2)

    def _draw_dynamic_horizon(self, surface: Surface, center_x: float, center_y: float, radius: float) -> None:
        cfg = self._config
        surface.save()
        surface.translate(center_x, center_y)
        surface.rotate(-normalize_yaw(self._state.yaw))

        pitch_offset = pitch_to_offset(self._state.pitch, radius)

        # Equal offsets at 0.5 give a hard sky/ground edge rather than a blend
        gradient = LinearGradient(
            0, -radius + pitch_offset,
            0, radius + pitch_offset,
            stops=(
                (0.0, cfg.sky_color),
                (0.5, cfg.sky_color),
                (0.5, cfg.ground_color),
                (1.0, cfg.ground_color),
            ),
        )
        surface.begin_path()
        surface.arc(0, 0, radius, 0, math.pi * 2)
        surface.fill(gradient)

        surface.begin_path()
        surface.move_to(-radius, pitch_offset)
        surface.line_to(radius, pitch_offset)
        surface.stroke(cfg.scale_color, 2)

        surface.restore()

    def _draw_fixed_indicators(self, surface: Surface, center_x: float, center_y: float, radius: float) -> None:
        self._draw_heading_indicators(surface, center_x, center_y, radius)
        self._draw_pitch_indicators(surface, center_x, center_y)

    def _draw_pitch_indicators(self, surface: Surface, center_x: float, center_y: float) -> None:
        spacing = self._config.line_spacing
        surface.save()
        for i in range(1, int(self._config.pitch_lines) + 1):
            self._draw_pitch_line(surface, center_x, center_y - i * spacing, i)
            self._draw_pitch_line(surface, center_x, center_y + i * spacing, i)
        surface.restore()

    def _draw_pitch_line(self, surface: Surface, center_x: float, y: float, i: int) -> None:
        color = self._config.scale_color
        half = LADDER_LINE_LENGTH

        surface.begin_path()
        if i % 2:
            surface.move_to(center_x - half / 2 + 5, y)
            surface.line_to(center_x + half / 2 - 5, y)
        else:
            surface.move_to(center_x - half, y)
            surface.line_to(center_x + half, y)
            label = str(i * 10)
            surface.fill_text(label, center_x + half + LADDER_LABEL_GAP, y + LADDER_LABEL_BASELINE, color, LADDER_FONT)
            surface.fill_text(label, center_x - half - LADDER_LABEL_GAP, y + LADDER_LABEL_BASELINE, color, LADDER_FONT)
        surface.stroke(color, 1)

    def _draw_heading_indicators(self, surface: Surface, center_x: float, center_y: float, radius: float) -> None:
        color = self._config.scale_color
        center = (center_x, center_y)
        surface.save()

        angles = [angle for angle, _ in CARDINAL_HEADINGS]
        inner = compass_points(center, angles, radius - CARDINAL_TICK_LENGTH)
        outer = compass_points(center, angles, radius)
        labels = compass_points(center, angles, radius + HEADING_TEXT_OFFSET / 2)
        for (_, text), p0, p1, lp in zip(CARDINAL_HEADINGS, inner, outer, labels):
            surface.begin_path()
            surface.move_to(p0[0], p0[1])
            surface.line_to(p1[0], p1[1])
            surface.stroke(color, 1)
            surface.fill_text(text, lp[0], lp[1] + HEADING_LABEL_BASELINE, color, HEADING_FONT)

        minor = minor_heading_angles(MINOR_TICK_STEP)
        tips = compass_points(center, minor, radius + MINOR_TICK_LENGTH)
        bases = compass_points(center, minor, radius)
        for angle, tip, base in zip(minor, tips, bases):
            surface.begin_path()
            surface.move_to(tip[0], tip[1])
            surface.line_to(base[0], base[1])
            surface.stroke(color, 1)
            surface.fill_text(str(angle // 10), tip[0], tip[1] + HEADING_LABEL_BASELINE, color, HEADING_FONT)

        surface.restore()

    def _draw_fixed_markers(self, surface: Surface, center_x: float, center_y: float) -> None:
        # Static reference symbol: always one degree of pitch below center,
        # whatever the current attitude
        radius = dial_radius(center_x, center_y)
        y = center_y + MARKER_PITCH_DEG * pitch_scale(radius)

        surface.save()
        surface.begin_path()
        surface.move_to(center_x - MARKER_WING_OUTER, y)
        surface.line_to(center_x - MARKER_WING_INNER, y)
        surface.move_to(center_x + MARKER_WING_INNER, y)
        surface.line_to(center_x + MARKER_WING_OUTER, y)
        surface.stroke(MARKER_WING_COLOR, 2)

        surface.begin_path()
        surface.move_to(center_x, y + MARKER_CENTER_HALF_LENGTH)
        surface.line_to(center_x, y - MARKER_CENTER_HALF_LENGTH)
        surface.stroke(MARKER_CENTER_COLOR, 5)
        surface.restore()
