"""
Gauge Configuration
===================
This module defines the immutable configuration record of the gauge and the
table of recognized options with their defaults.

Why is this file needed?
------------------------
1. Explicit defaults: every recognized option is enumerated in `DEFAULTS`, so
   a typo in an option name is reported instead of silently ignored.
2. Validation: bounds are checked once, at construction, so the drawing code
   can rely on `min <= max` for both angle pairs.

Exports:
    GaugeConfig: Frozen dataclass holding bounds, colors and ladder layout.
    DEFAULTS (dict): Default value for every recognized option.
    OPTION_ALIASES (dict): camelCase option name -> GaugeConfig field name.
    with_defaults: Merge user overrides over DEFAULTS.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from numbers import Integral, Real
from typing import Any, Mapping, Optional

from attitudegauge.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GaugeConfig:
    """Immutable gauge configuration. Angles are in degrees, spacing in pixels."""
    min_angle: float = -360.0
    max_angle: float = 360.0
    min_pitch: float = -90.0
    max_pitch: float = 90.0
    sky_color: str = "#87CEEB"
    ground_color: str = "#8B4513"
    scale_color: str = "#fff"
    pitch_lines: int = 6
    line_spacing: float = 10.0

    def __post_init__(self) -> None:
        for name in ("min_angle", "max_angle", "min_pitch", "max_pitch", "line_spacing"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
        if isinstance(self.pitch_lines, bool) or not isinstance(self.pitch_lines, Integral):
            raise ConfigurationError(f"pitch_lines must be an integer, got {self.pitch_lines!r}")

        if self.min_angle > self.max_angle:
            raise ConfigurationError(
                f"min_angle ({self.min_angle}) must not exceed max_angle ({self.max_angle})"
            )
        if self.min_pitch > self.max_pitch:
            raise ConfigurationError(
                f"min_pitch ({self.min_pitch}) must not exceed max_pitch ({self.max_pitch})"
            )
        if self.pitch_lines < 0:
            raise ConfigurationError(f"pitch_lines must be >= 0, got {self.pitch_lines}")
        if self.line_spacing < 0:
            raise ConfigurationError(f"line_spacing must be >= 0, got {self.line_spacing}")
        for name in ("sky_color", "ground_color", "scale_color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"{name} must be a non-empty color string, got {value!r}")

    def replace(self, **changes: Any) -> GaugeConfig:
        """Return a validated copy with the given fields changed."""
        return replace(self, **changes)


DEFAULTS: dict[str, Any] = {f.name: f.default for f in fields(GaugeConfig)}

OPTION_ALIASES: dict[str, str] = {
    "minAngle": "min_angle",
    "maxAngle": "max_angle",
    "minPitch": "min_pitch",
    "maxPitch": "max_pitch",
    "skyColor": "sky_color",
    "groundColor": "ground_color",
    "scaleColor": "scale_color",
    "pitchLines": "pitch_lines",
    "lineSpacing": "line_spacing",
}


def with_defaults(overrides: Optional[Mapping[str, Any]] = None) -> GaugeConfig:
    """
    Build a GaugeConfig from DEFAULTS with `overrides` merged on top.

    The merge is shallow (one level). Keys may be either the GaugeConfig field
    names (`sky_color`) or the camelCase option names (`skyColor`).

    Args:
        overrides: Mapping of option name -> value. None means all defaults.

    Returns:
        A validated GaugeConfig.

    Raises:
        ConfigurationError: On an unrecognized key or inconsistent values.
    """
    merged = dict(DEFAULTS)
    if overrides is None:
        return GaugeConfig(**merged)

    if not isinstance(overrides, Mapping):
        raise ConfigurationError(f"options must be a mapping, got {type(overrides).__name__}")

    for key, value in overrides.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in DEFAULTS:
            raise ConfigurationError(f"Unknown gauge option '{key}'")
        merged[name] = value

    logger.debug(f"Gauge options merged: {dict(overrides)}")
    return GaugeConfig(**merged)
