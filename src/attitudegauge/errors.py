"""Exceptions raised by the gauge and its drawing surfaces."""


class GaugeError(Exception):
    """Base class for all gauge errors."""


class ConfigurationError(GaugeError, ValueError):
    """Invalid options, or a missing/invalid drawing surface at construction."""


class SurfaceError(GaugeError, RuntimeError):
    """A drawing call failed because the surface is no longer usable."""
