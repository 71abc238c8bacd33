from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import Iterable


@dataclass(frozen=True)
class Mass:
    """
    Masa puntual montada sobre el eje.

    Se reconstruye en cada evaluación a partir de los campos de entrada; no hay
    objetos Mass mutables persistentes. Un campo vacío o inválido llega como NaN.
    """
    mass_kg: float
    radius_m: float
    angle_deg: float    # posición angular con fase de rotación 0
    position_m: float   # posición axial sobre el eje

    @property
    def unbalance(self) -> float:
        """Desbalance m·r (kg·m)."""
        return float(self.mass_kg) * float(self.radius_m)

    def is_finite(self) -> bool:
        return all(math.isfinite(float(v)) for v in (self.mass_kg, self.radius_m, self.angle_deg, self.position_m))


DEFAULT_MASS_KG = 1.0
DEFAULT_RADIUS_M = 0.2
DEFAULT_ANGLE_STEP_DEG = 90.0
DEFAULT_POSITION_STEP_M = 0.5


def default_mass(index: int) -> Mass:
    """
    Valores iniciales del grupo de entradas `index` (1-based):
      m=1 kg, r=0.2 m, ángulo=(i-1)*90°, posición=(i-1)*0.5 m
    """
    k = int(index) - 1
    return Mass(
        mass_kg=DEFAULT_MASS_KG,
        radius_m=DEFAULT_RADIUS_M,
        angle_deg=k * DEFAULT_ANGLE_STEP_DEG,
        position_m=k * DEFAULT_POSITION_STEP_M,
    )


def _same_value(a: float, b: float) -> bool:
    a, b = float(a), float(b)
    return a == b or (math.isnan(a) and math.isnan(b))


def same_masses(a: Iterable[Mass], b: Iterable[Mass]) -> bool:
    """Igualdad de listas de masas campo a campo; NaN == NaN (campo vacío en ambas)."""
    a, b = list(a), list(b)
    if len(a) != len(b):
        return False
    return all(_same_value(x, y) for ma, mb in zip(a, b) for x, y in zip(astuple(ma), astuple(mb)))
