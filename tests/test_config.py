import pytest

from attitudegauge.config import DEFAULTS, GaugeConfig, with_defaults
from attitudegauge.errors import ConfigurationError


def test_defaults_match_options_table():
    cfg = with_defaults()
    assert (cfg.min_angle, cfg.max_angle) == (-360, 360)
    assert (cfg.min_pitch, cfg.max_pitch) == (-90, 90)
    assert cfg.sky_color == "#87CEEB"
    assert cfg.ground_color == "#8B4513"
    assert cfg.scale_color == "#fff"
    assert cfg.pitch_lines == 6
    assert cfg.line_spacing == 10


def test_every_field_has_a_default():
    assert set(DEFAULTS) == set(GaugeConfig.__dataclass_fields__)


def test_camel_case_and_snake_case_overrides():
    cfg = with_defaults({"skyColor": "#00f", "pitch_lines": 3, "maxAngle": 180})
    assert cfg.sky_color == "#00f"
    assert cfg.pitch_lines == 3
    assert cfg.max_angle == 180
    # untouched keys keep their defaults
    assert cfg.ground_color == "#8B4513"


def test_unknown_option_rejected():
    with pytest.raises(ConfigurationError, match="Unknown gauge option 'skyColour'"):
        with_defaults({"skyColour": "#00f"})


def test_options_must_be_mapping():
    with pytest.raises(ConfigurationError):
        with_defaults([("skyColor", "#00f")])


@pytest.mark.parametrize("overrides", [
    {"minAngle": 10, "maxAngle": -10},
    {"minPitch": 45, "maxPitch": 0},
    {"pitchLines": -1},
    {"lineSpacing": -5},
    {"scaleColor": ""},
])
def test_inconsistent_values_rejected(overrides):
    with pytest.raises(ConfigurationError):
        with_defaults(overrides)


def test_equal_bounds_allowed():
    cfg = with_defaults({"minPitch": 0, "maxPitch": 0})
    assert cfg.min_pitch == cfg.max_pitch == 0


def test_config_is_immutable_and_replace_validates():
    cfg = GaugeConfig()
    with pytest.raises(AttributeError):
        cfg.sky_color = "#000"
    assert cfg.replace(pitch_lines=2).pitch_lines == 2
    with pytest.raises(ConfigurationError):
        cfg.replace(min_angle=1000)


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


@pytest.mark.parametrize("overrides", [
    {"pitchLines": "3"},
    {"pitchLines": 2.5},
    {"pitchLines": True},
    {"minAngle": None},
    {"maxPitch": "90"},
    {"lineSpacing": "10"},
    {"lineSpacing": False},
    {"minPitch": float("nan")},
])
def test_wrongly_typed_values_rejected(overrides):
    with pytest.raises(ConfigurationError):
        with_defaults(overrides)


def test_integral_floats_accepted_for_bounds():
    cfg = with_defaults({"minAngle": -180, "maxAngle": 180.5, "lineSpacing": 12})
    assert (cfg.min_angle, cfg.max_angle, cfg.line_spacing) == (-180, 180.5, 12)
