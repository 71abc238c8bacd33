from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Shaft:
    """
    Eje del rotor.
    axial_span_m: posición axial máxima admitida por las entradas; se usa para
    repartir las masas sobre el largo dibujado del eje.
    """
    length_m: float = 0.5
    axial_span_m: float = 2.0
