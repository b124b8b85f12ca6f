import json

import pytest

from attitudegauge.render import main

pytestmark = pytest.mark.usefixtures("qapp")


def test_render_writes_png(tmp_path):
    target = tmp_path / "gauge.png"
    assert main(["--yaw", "45", "--pitch", "30", "--output", str(target)]) == 0
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_with_options_file(tmp_path):
    options = tmp_path / "options.json"
    options.write_text(json.dumps({"skyColor": "#0000ff", "pitchLines": 2}), encoding="utf-8")
    target = tmp_path / "gauge.png"
    assert main(["--options", str(options), "--width", "300", "--height", "240", "-o", str(target)]) == 0
    assert target.exists()


def test_render_rejects_bad_options(tmp_path):
    options = tmp_path / "options.json"
    options.write_text(json.dumps({"colour": "red"}), encoding="utf-8")
    assert main(["--options", str(options), "-o", str(tmp_path / "x.png")]) == 2


def test_render_rejects_unreadable_options(tmp_path):
    assert main(["--options", str(tmp_path / "missing.json"), "-o", str(tmp_path / "x.png")]) == 2


def test_render_reports_unwritable_output(tmp_path):
    target = tmp_path / "no" / "such" / "dir" / "gauge.png"
    assert main(["-o", str(target)]) == 1


@pytest.mark.parametrize("options", [
    {"pitchLines": "3"},
    {"minAngle": None},
    {"lineSpacing": "10"},
    {"maxPitch": True},
])
def test_render_rejects_wrongly_typed_options(tmp_path, options):
    path = tmp_path / "options.json"
    path.write_text(json.dumps(options), encoding="utf-8")
    assert main(["--options", str(path), "-o", str(tmp_path / "x.png")]) == 2
    assert not (tmp_path / "x.png").exists()
