from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from rotor_balance.domain.masses import Mass
from rotor_balance.domain.results import BalanceResult

DEFAULT_TOLERANCE = 0.01


def _effective_angle_rad(angle_deg: float, phase_deg: float) -> float:
    return math.radians(float(angle_deg) + float(phase_deg))


def _sum_contributions(masses: Iterable[Mass], phase_deg: float) -> Tuple[float, float, float, float]:
    """
    Devuelve (ΣFx, ΣFy, ΣMx, ΣMy) en la fase indicada.

    Para cada masa:
      θ = ángulo + fase
      f = m·r          (desbalance; no interviene ω ni g)
      Fx = f·cos θ     Fy = f·sin θ
      Mx = f·z·cos θ   My = f·z·sin θ   (z = posición axial)
    Un NaN en cualquier campo se propaga a las sumas.
    """
    Fx = 0.0
    Fy = 0.0
    Mx = 0.0
    My = 0.0

    for m in masses:
        th = _effective_angle_rad(m.angle_deg, phase_deg)
        f = float(m.mass_kg) * float(m.radius_m)
        z = float(m.position_m)
        c = math.cos(th)
        s = math.sin(th)

        Fx += f * c
        Fy += f * s
        Mx += f * z * c
        My += f * z * s

    return Fx, Fy, Mx, My


def _within(v: float, tol: float) -> bool:
    # NaN < tol es False => desbalanceado
    return abs(v) < tol


def evaluate_balance(masses: Iterable[Mass], phase_deg: float = 0.0, tolerance: float = DEFAULT_TOLERANCE) -> BalanceResult:
    """
    Evalúa el balanceo estático y dinámico en la fase `phase_deg`.

    Estático:  |ΣFx| < tol  y  |ΣFy| < tol
    Dinámico:  estático  y  |ΣMx| < tol  y  |ΣMy| < tol

    Función pura: mismas entradas => mismo resultado.
    """
    tol = float(tolerance)
    Fx, Fy, Mx, My = _sum_contributions(masses, phase_deg)

    static_ok = _within(Fx, tol) and _within(Fy, tol)
    dynamic_ok = static_ok and _within(Mx, tol) and _within(My, tol)

    return BalanceResult(
        sum_fx=Fx,
        sum_fy=Fy,
        sum_mx=Mx,
        sum_my=My,
        statically_balanced=static_ok,
        dynamically_balanced=dynamic_ok,
        phase_deg=float(phase_deg),
        tolerance=tol,
    )


def shift_angles(masses: Iterable[Mass], delta_deg: float) -> List[Mass]:
    """Gira todas las masas `delta_deg` (equivale a avanzar la fase)."""
    return [
        Mass(mass_kg=m.mass_kg, radius_m=m.radius_m, angle_deg=float(m.angle_deg) + float(delta_deg), position_m=m.position_m)
        for m in masses
    ]
