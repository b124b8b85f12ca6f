import numpy as np
import pytest

from attitudegauge.model.geometry_utils import (
    compass_points, minor_heading_angles, normalize_yaw, pitch_to_offset,
)
from attitudegauge.model.state import GaugeState, clamp


@pytest.mark.parametrize("yaw, expected", [
    (0, 0), (10, 10), (370, 10), (-10, 350), (360, 0), (-360, 0), (720, 0), (359.5, 359.5),
])
def test_normalize_yaw(yaw, expected):
    assert normalize_yaw(yaw) == pytest.approx(expected)


def test_pitch_mapping_is_linear_and_symmetric():
    assert pitch_to_offset(90, 100) == pytest.approx(100)
    assert pitch_to_offset(-45, 100) == pytest.approx(-50)
    assert pitch_to_offset(30, 80) == pytest.approx(26.6667, rel=1e-4)
    assert pitch_to_offset(0, 80) == 0


def test_compass_points_use_clockwise_from_north():
    pts = compass_points((100, 100), [0, 90, 180, 270], 50)
    expected = np.array([[100, 50], [150, 100], [100, 150], [50, 100]], dtype=float)
    assert np.allclose(pts, expected)


def test_compass_points_accepts_scalar():
    pts = compass_points((0, 0), 45, np.sqrt(2))
    assert pts.shape == (1, 2)
    assert np.allclose(pts[0], [1, -1])


def test_minor_heading_angles_skip_cardinals():
    assert minor_heading_angles() == [30, 60, 120, 150, 210, 240, 300, 330]


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10


def test_state_clamps_on_write():
    state = GaugeState()
    assert (state.yaw, state.pitch) == (0, 0)
    state.set_yaw(720, -360, 360)
    state.set_pitch(-100, -90, 90)
    assert (state.yaw, state.pitch) == (360, -90)
