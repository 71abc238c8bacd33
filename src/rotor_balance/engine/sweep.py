from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple
import numpy as np

from rotor_balance.domain.masses import Mass
from rotor_balance.engine.balance import DEFAULT_TOLERANCE


@dataclass(frozen=True)
class RevolutionSweep:
    """
    Sumas ΣFx, ΣFy, ΣMx, ΣMy en función de la fase φ (grados).

    Mismas reglas que evaluate_balance, vectorizadas:
      f_i = m_i·r_i ; θ_i = a_i + φ
      ΣFx(φ) = Σ f_i cos θ_i  ...  ΣMy(φ) = Σ f_i z_i sin θ_i
    """
    f: np.ndarray        # desbalance m·r por masa
    z: np.ndarray        # posición axial
    a_deg: np.ndarray    # ángulo a fase 0

    def _eval_arrays(self, phase_deg: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        phi = np.asarray(phase_deg, dtype=float)
        zero = np.zeros_like(phi, dtype=float)
        if self.f.size == 0:
            return zero, zero.copy(), zero.copy(), zero.copy()

        th = np.deg2rad(self.a_deg[None, :] + phi[:, None])
        c = np.cos(th)
        s = np.sin(th)

        fx = c @ self.f
        fy = s @ self.f
        mx = c @ (self.f * self.z)
        my = s @ (self.f * self.z)
        return fx, fy, mx, my

    def eval_at(self, phase_deg: float) -> Tuple[float, float, float, float]:
        fx, fy, mx, my = self._eval_arrays(np.asarray([phase_deg], dtype=float))
        return float(fx[0]), float(fy[0]), float(mx[0]), float(my[0])

    def sample(self, n: int = 361) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """(φ, ΣFx, ΣFy, ΣMx, ΣMy) en [0, 360] con n puntos."""
        phi = np.linspace(0.0, 360.0, max(2, int(n)), dtype=float)
        fx, fy, mx, my = self._eval_arrays(phi)
        return phi, fx, fy, mx, my

    def max_resultant_force(self, n: int = 361) -> float:
        _, fx, fy, _, _ = self.sample(n)
        return float(np.max(np.hypot(fx, fy)))

    def max_resultant_moment(self, n: int = 361) -> float:
        _, _, _, mx, my = self.sample(n)
        return float(np.max(np.hypot(mx, my)))

    def is_balanced_over_revolution(self, tolerance: float = DEFAULT_TOLERANCE, n: int = 361) -> Tuple[bool, bool]:
        """
        (estático, dinámico) evaluados en toda la vuelta.
        NaN en las entradas => (False, False).
        """
        _, fx, fy, mx, my = self.sample(n)
        tol = float(tolerance)
        static_ok = bool(np.all(np.abs(fx) < tol) and np.all(np.abs(fy) < tol))
        dynamic_ok = static_ok and bool(np.all(np.abs(mx) < tol) and np.all(np.abs(my) < tol))
        return static_ok, dynamic_ok


def sweep_revolution(masses: Iterable[Mass]) -> RevolutionSweep:
    ms = list(masses)
    f = np.array([float(m.mass_kg) * float(m.radius_m) for m in ms], dtype=float)
    z = np.array([float(m.position_m) for m in ms], dtype=float)
    a = np.array([float(m.angle_deg) for m in ms], dtype=float)
    return RevolutionSweep(f=f, z=z, a_deg=a)
