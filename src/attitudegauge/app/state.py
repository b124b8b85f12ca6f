from __future__ import annotations

from PySide6.QtCore import QObject, Signal


class AttitudeStore(QObject):
    """
    Central state store for the requested attitude, with a signal for
    panel/gauge sync. Values are the raw requests; the gauge clamps them.
    """
    attitude_changed = Signal(float, float)

    def __init__(self) -> None:
        super().__init__()
        self._yaw = 0.0
        self._pitch = 0.0

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    def set_yaw(self, yaw: float) -> None:
        self.set_attitude(yaw, self._pitch)

    def set_pitch(self, pitch: float) -> None:
        self.set_attitude(self._yaw, pitch)

    def set_attitude(self, yaw: float, pitch: float) -> None:
        if (yaw, pitch) == (self._yaw, self._pitch):
            return
        self._yaw = float(yaw)
        self._pitch = float(pitch)
        self.attitude_changed.emit(self._yaw, self._pitch)
