import math

import pytest

from rotor_balance.domain.masses import Mass, default_mass, same_masses
from rotor_balance.engine.balance import evaluate_balance, shift_angles


def _four_symmetric(position_m=0.5):
    return [Mass(mass_kg=1.0, radius_m=0.2, angle_deg=a, position_m=position_m) for a in (0.0, 90.0, 180.0, 270.0)]


def test_zero_radius_or_zero_mass_gives_zero_sums_and_balanced():
    masses = [
        Mass(mass_kg=1.0, radius_m=0.0, angle_deg=30.0, position_m=0.4),
        Mass(mass_kg=0.0, radius_m=0.3, angle_deg=200.0, position_m=1.2),
    ]
    res = evaluate_balance(masses, phase_deg=47.0)
    assert (res.sum_fx, res.sum_fy, res.sum_mx, res.sum_my) == (0.0, 0.0, 0.0, 0.0)
    assert res.statically_balanced
    assert res.dynamically_balanced


def test_no_masses_is_balanced():
    res = evaluate_balance([], phase_deg=10.0)
    assert res.rounded() == (0.0, 0.0, 0.0, 0.0)
    assert res.dynamically_balanced


def test_opposite_pair_in_different_planes_is_static_but_not_dynamic():
    masses = [
        Mass(mass_kg=1.0, radius_m=0.2, angle_deg=0.0, position_m=0.0),
        Mass(mass_kg=1.0, radius_m=0.2, angle_deg=180.0, position_m=0.5),
    ]
    res = evaluate_balance(masses, phase_deg=0.0)
    assert res.sum_fx == pytest.approx(0.0, abs=1e-12)
    assert res.sum_fy == pytest.approx(0.0, abs=1e-12)
    assert res.sum_mx == pytest.approx(-0.1)
    assert res.statically_balanced
    assert not res.dynamically_balanced


@pytest.mark.parametrize("phase", [0.0, 13.0, 45.0, 90.0, 137.5, 222.2, 359.0, 720.3])
def test_four_symmetric_masses_balanced_at_every_phase(phase):
    res = evaluate_balance(_four_symmetric(), phase_deg=phase)
    for v in (res.sum_fx, res.sum_fy, res.sum_mx, res.sum_my):
        assert v == pytest.approx(0.0, abs=1e-12)
    assert res.statically_balanced
    assert res.dynamically_balanced


def test_default_four_masses_static_only():
    masses = [default_mass(i) for i in range(1, 5)]
    res = evaluate_balance(masses)
    assert res.statically_balanced
    assert not res.dynamically_balanced
    assert res.sum_mx == pytest.approx(-0.2)
    assert res.sum_my == pytest.approx(-0.2)


@pytest.mark.parametrize("phi", [0.0, 30.0, 91.0, 250.0])
def test_phase_advance_equals_rotating_angles(phi):
    masses = [
        Mass(mass_kg=1.3, radius_m=0.25, angle_deg=10.0, position_m=0.1),
        Mass(mass_kg=0.7, radius_m=0.4, angle_deg=200.0, position_m=1.1),
        Mass(mass_kg=2.0, radius_m=0.1, angle_deg=300.0, position_m=1.9),
    ]
    a = evaluate_balance(masses, phase_deg=phi)
    b = evaluate_balance(shift_angles(masses, phi), phase_deg=0.0)
    assert a.sum_fx == pytest.approx(b.sum_fx)
    assert a.sum_fy == pytest.approx(b.sum_fy)
    assert a.sum_mx == pytest.approx(b.sum_mx)
    assert a.sum_my == pytest.approx(b.sum_my)
    assert a.statically_balanced == b.statically_balanced
    assert a.dynamically_balanced == b.dynamically_balanced


def test_evaluation_is_idempotent_and_does_not_mutate_inputs():
    masses = [default_mass(i) for i in range(1, 4)]
    before = list(masses)
    r1 = evaluate_balance(masses, phase_deg=12.5)
    r2 = evaluate_balance(masses, phase_deg=12.5)
    assert r1 == r2
    assert masses == before


@pytest.mark.parametrize("phase", [0.0, 45.0, 90.0, 180.0, 271.0])
def test_single_nonzero_mass_never_statically_balanced(phase):
    res = evaluate_balance([Mass(mass_kg=1.0, radius_m=0.2, angle_deg=33.0, position_m=0.0)], phase_deg=phase)
    assert res.resultant_force == pytest.approx(0.2)
    assert not res.statically_balanced
    assert not res.dynamically_balanced


def test_nan_input_propagates_and_is_unbalanced():
    masses = [
        Mass(mass_kg=math.nan, radius_m=0.2, angle_deg=0.0, position_m=0.0),
        Mass(mass_kg=1.0, radius_m=0.2, angle_deg=180.0, position_m=0.0),
    ]
    res = evaluate_balance(masses)
    assert math.isnan(res.sum_fx)
    assert math.isnan(res.sum_my)
    assert not res.statically_balanced
    assert not res.dynamically_balanced


def test_tolerance_is_strict_and_absolute():
    # |ΣF| = 0.01 exactamente no cumple (< estricto)
    m = Mass(mass_kg=0.1, radius_m=0.1, angle_deg=0.0, position_m=0.0)
    assert not evaluate_balance([m]).statically_balanced
    assert evaluate_balance([m], tolerance=0.011).statically_balanced


def test_rounded_uses_three_decimals():
    m = Mass(mass_kg=1.0, radius_m=0.123456, angle_deg=0.0, position_m=1.0)
    res = evaluate_balance([m])
    assert res.rounded() == (0.123, 0.0, 0.123, 0.0)


def test_same_masses_treats_empty_fields_as_equal():
    a = [default_mass(1), Mass(mass_kg=math.nan, radius_m=0.2, angle_deg=90.0, position_m=0.5)]
    b = [default_mass(1), Mass(mass_kg=math.nan, radius_m=0.2, angle_deg=90.0, position_m=0.5)]
    assert same_masses(a, b)
    assert not same_masses(a, b[:1])
    assert not same_masses(a, [default_mass(1), default_mass(2)])
    assert same_masses([], [])
