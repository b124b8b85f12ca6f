import pytest

from attitudegauge.app.state import AttitudeStore
from attitudegauge.app.ui.gauge_widget import GaugeWidget
from attitudegauge.app.ui.main_window import MainWindow

pytestmark = pytest.mark.usefixtures("qapp")


def test_store_emits_on_change():
    store = AttitudeStore()
    seen = []
    store.attitude_changed.connect(lambda y, p: seen.append((y, p)))
    store.set_yaw(10)
    store.set_pitch(-5)
    store.set_pitch(-5)
    assert seen == [(10.0, 0.0), (10.0, -5.0)]


def test_widget_clamps_through_gauge():
    widget = GaugeWidget({"maxPitch": 20})
    widget.set_attitude(720, 45)
    assert widget.gauge.yaw == 360
    assert widget.gauge.pitch == 20


def test_widget_rebinds_surface_on_resize(qapp):
    widget = GaugeWidget()
    old = widget.surface
    widget.resize(300, 260)
    widget.show()
    qapp.processEvents()
    assert widget.surface is not old
    assert not old.is_valid()
    assert widget.gauge.surface is widget.surface
    assert widget.surface.image.width() == widget.width()
    assert widget.surface.image.height() == widget.height()
    widget.close()


def test_main_window_controls_drive_gauge():
    window = MainWindow()
    window.controls.spin("yaw").setValue(45)
    window.controls.spin("pitch").setValue(120)
    assert window.store.yaw == 45
    assert window.store.pitch == 120
    assert window.gauge_widget.gauge.yaw == 45
    assert window.gauge_widget.gauge.pitch == 90
    assert "Pitch 90.0" in window.statusBar().currentMessage()
    window.close()


def test_store_updates_sync_back_to_controls():
    window = MainWindow()
    window.store.set_attitude(-30, 12.5)
    assert window.controls.spin("yaw").value() == -30
    assert window.controls.spin("pitch").value() == 12.5
    window.close()


def test_create_app_reuses_running_application(qapp):
    from attitudegauge.app.application import create_app

    assert create_app([]) is qapp
