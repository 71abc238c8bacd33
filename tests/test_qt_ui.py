import math
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QObject
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from rotor_balance.config import DEFAULT_CONFIG
from rotor_balance.domain.masses import Mass, default_mass
from rotor_balance.engine.driver import DriverState
from rotor_balance.ui.main_window import BalancingApp
from rotor_balance.ui.mass_inputs import MassInputPanel
from rotor_balance.ui.qt_scheduler import QtTickScheduler


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    w = BalancingApp()
    yield w
    w.driver.stop()
    w.close()
    w.deleteLater()
    QTest.qWait(1)


# -------------------------
# Entradas de masas
# -------------------------
@pytest.mark.parametrize("count", [1, 2, 3, 4])
def test_mass_panel_regenerate_gives_defaults_per_index(qapp, count):
    panel = MassInputPanel(count=4)
    panel.regenerate(count)
    masses = panel.get_masses(count)
    assert len(masses) == count
    assert masses == [default_mass(i) for i in range(1, count + 1)]


def test_mass_panel_empty_field_reads_nan(qapp):
    panel = MassInputPanel(count=2)
    panel._groups[1].f_radius.setText("")
    m1, m2 = panel.get_masses(2)
    assert m1 == default_mass(1)
    assert math.isnan(m2.radius_m)
    assert m2.mass_kg == 1.0


def test_mass_panel_position_limit_follows_axial_span(qapp):
    panel = MassInputPanel(count=1)
    assert panel._groups[0].f_position.validator().top() == DEFAULT_CONFIG.axial_span_m

    wide = MassInputPanel(count=2, axial_span_m=3.0)
    assert all(g.f_position.validator().top() == 3.0 for g in wide._groups)


# -------------------------
# Scheduler Qt
# -------------------------
def test_qt_scheduler_fires_once_and_cancel_prevents_firing(qapp):
    owner = QObject()
    sched = QtTickScheduler(owner)
    fired = []
    sched.schedule(5, lambda: fired.append("a"))
    h = sched.schedule(5, lambda: fired.append("b"))
    sched.cancel(h)
    QTest.qWait(60)
    assert fired == ["a"]


# -------------------------
# Ventana: Rotate / Stop / Reset
# -------------------------
def test_rotate_stop_reset_cycle(window):
    sim = window.driver.sim

    window.btn_rotate.click()
    assert window.driver.state is DriverState.RUNNING
    assert window.btn_rotate.text() == "Stop"
    QTest.qWait(120)
    assert sim.frames > 1

    window.btn_rotate.click()
    assert window.driver.state is DriverState.STOPPED
    assert window.btn_rotate.text() == "Rotate"
    frozen = (sim.frames, sim.phase_deg)
    QTest.qWait(80)
    assert (sim.frames, sim.phase_deg) == frozen

    window.btn_rotate.click()
    window.btn_reset.click()
    assert sim.frames == 0
    assert sim.phase_deg == 0.0
    assert window.driver.state is DriverState.STOPPED
    QTest.qWait(80)
    assert sim.frames == 0
    assert window.results_panel.text() == ""


def test_sweep_curves_rebuilt_only_when_masses_change(window):
    masses = [default_mass(1), default_mass(2)]
    window.render_frame(masses, 10.0)
    curves = list(window.ax_F.get_lines())

    window.render_frame(list(masses), 11.0)
    assert list(window.ax_F.get_lines()) == curves
    assert [m.get_xdata()[0] for m in window._phase_markers] == [pytest.approx(11.0)] * 2

    window.render_frame([Mass(mass_kg=2.0, radius_m=0.2, angle_deg=0.0, position_m=0.0)], 12.0)
    assert list(window.ax_F.get_lines()) != curves
