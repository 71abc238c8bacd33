import numpy as np
import pytest

from rotor_balance.domain.masses import Mass
from rotor_balance.engine.balance import evaluate_balance
from rotor_balance.engine.sweep import sweep_revolution


PAIR = [
    Mass(mass_kg=1.0, radius_m=0.2, angle_deg=0.0, position_m=0.0),
    Mass(mass_kg=1.0, radius_m=0.2, angle_deg=180.0, position_m=0.5),
]


@pytest.mark.parametrize("phase", [0.0, 17.0, 123.4, 300.0])
def test_eval_at_matches_evaluator(phase):
    masses = PAIR + [Mass(mass_kg=0.5, radius_m=0.3, angle_deg=77.0, position_m=1.4)]
    sweep = sweep_revolution(masses)
    res = evaluate_balance(masses, phase_deg=phase)
    fx, fy, mx, my = sweep.eval_at(phase)
    assert fx == pytest.approx(res.sum_fx, abs=1e-12)
    assert fy == pytest.approx(res.sum_fy, abs=1e-12)
    assert mx == pytest.approx(res.sum_mx, abs=1e-12)
    assert my == pytest.approx(res.sum_my, abs=1e-12)


def test_sample_covers_full_revolution():
    phi, fx, fy, mx, my = sweep_revolution(PAIR).sample(n=91)
    assert phi[0] == 0.0
    assert phi[-1] == 360.0
    assert len(phi) == len(fx) == len(fy) == len(mx) == len(my) == 91


def test_pair_is_static_but_not_dynamic_over_revolution():
    sweep = sweep_revolution(PAIR)
    assert sweep.is_balanced_over_revolution() == (True, False)
    assert sweep.max_resultant_force() == pytest.approx(0.0, abs=1e-12)
    assert sweep.max_resultant_moment() == pytest.approx(0.1)


def test_symmetric_four_masses_balanced_over_revolution():
    masses = [Mass(mass_kg=2.0, radius_m=0.15, angle_deg=a, position_m=0.8) for a in (0.0, 90.0, 180.0, 270.0)]
    assert sweep_revolution(masses).is_balanced_over_revolution() == (True, True)


def test_empty_sweep_is_zero():
    _, fx, fy, mx, my = sweep_revolution([]).sample(n=10)
    assert not np.any(fx) and not np.any(fy) and not np.any(mx) and not np.any(my)


def test_default_sample_is_one_point_per_degree():
    phi, *_ = sweep_revolution(PAIR).sample()
    assert len(phi) == 361
    assert phi[1] - phi[0] == pytest.approx(1.0)
