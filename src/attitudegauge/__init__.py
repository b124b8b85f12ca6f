"""
Attitude/heading indicator rendering.

The gauge itself has no knowledge of Qt: it issues drawing commands against
any `Surface` implementation. The Qt backend and the desktop app live in
`attitudegauge.surface.qt` and `attitudegauge.app`.
"""
from attitudegauge.config import GaugeConfig, with_defaults
from attitudegauge.errors import ConfigurationError, GaugeError, SurfaceError
from attitudegauge.gauge import AttitudeGauge

__all__ = [
    "AttitudeGauge",
    "ConfigurationError",
    "GaugeConfig",
    "GaugeError",
    "SurfaceError",
    "with_defaults",
]
