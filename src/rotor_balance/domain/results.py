from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BalanceResult:
    # Sumas con precisión completa (el redondeo es solo para mostrar)
    sum_fx: float
    sum_fy: float
    sum_mx: float
    sum_my: float

    statically_balanced: bool
    dynamically_balanced: bool

    phase_deg: float = 0.0
    tolerance: float = 0.01

    def rounded(self, digits: int = 3) -> Tuple[float, float, float, float]:
        return (
            round(self.sum_fx, digits),
            round(self.sum_fy, digits),
            round(self.sum_mx, digits),
            round(self.sum_my, digits),
        )

    @property
    def resultant_force(self) -> float:
        return math.hypot(self.sum_fx, self.sum_fy)

    @property
    def resultant_moment(self) -> float:
        return math.hypot(self.sum_mx, self.sum_my)
