"""
Gauge State (Data Model)
========================
The mutable (yaw, pitch) pair owned by one gauge instance.

Values are clamped on write, so every reader sees a value inside the
configured bounds.
"""
from __future__ import annotations

from dataclasses import dataclass


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit `value` to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))


@dataclass
class GaugeState:
    yaw: float = 0.0
    pitch: float = 0.0

    def set_yaw(self, angle: float, lower: float, upper: float) -> None:
        self.yaw = clamp(angle, lower, upper)

    def set_pitch(self, angle: float, lower: float, upper: float) -> None:
        self.pitch = clamp(angle, lower, upper)
