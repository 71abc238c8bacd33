"""
Constantes de la simulación.

Los valores reproducen el banco de ensayo didáctico: eje de 0.5 m girando a
20 rad/s, con hasta 4 masas. La gravedad y la velocidad angular se conservan
como datos del banco, pero NO intervienen en las sumas de fuerzas/momentos
(el desbalance se mide como m·r).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from rotor_balance.domain.shaft import Shaft


@dataclass(frozen=True)
class SimulationConfig:
    shaft_length_m: float = 0.5
    axial_span_m: float = 2.0

    angular_velocity: float = 20.0   # rad/s
    gravity: float = 9.81            # m/s²
    frame_rate: float = 60.0         # ticks por segundo

    tolerance: float = 0.01          # tolerancia absoluta de balanceo

    mass_count_range: Tuple[int, int] = (1, 4)
    default_mass_count: int = 4

    @property
    def phase_step_deg(self) -> float:
        """
        Avance de fase por tick. Se suma en grados: ω / fps.
        """
        return float(self.angular_velocity) / float(self.frame_rate)

    @property
    def tick_interval_ms(self) -> int:
        return max(1, int(round(1000.0 / float(self.frame_rate))))

    def shaft(self) -> Shaft:
        return Shaft(length_m=self.shaft_length_m, axial_span_m=self.axial_span_m)

    def clamp_mass_count(self, n: int) -> int:
        lo, hi = self.mass_count_range
        return max(lo, min(hi, int(n)))


DEFAULT_CONFIG = SimulationConfig()
