from __future__ import annotations

import math
from typing import List, Optional, Sequence

from rotor_balance.domain.masses import Mass


def parse_number(text: Optional[str]) -> float:
    """
    Texto de un campo numérico -> float.
    Acepta coma decimal. Vacío o inválido => NaN (no se rechaza la entrada).
    """
    t = (text or "").strip().replace(",", ".")
    if t == "":
        return math.nan
    try:
        return float(t)
    except ValueError:
        return math.nan


def mass_from_fields(mass: str, radius: str, angle: str, position: str) -> Mass:
    return Mass(
        mass_kg=parse_number(mass),
        radius_m=parse_number(radius),
        angle_deg=parse_number(angle),
        position_m=parse_number(position),
    )


def masses_from_rows(rows: Sequence[Sequence[str]]) -> List[Mass]:
    """
    Cada fila: [masa, radio, ángulo, posición] como texto.
    Las filas incompletas se completan con vacío (=> NaN).
    """
    out: List[Mass] = []
    for row in rows:
        cells = list(row) + [""] * (4 - len(row))
        out.append(mass_from_fields(*cells[:4]))
    return out


def format_field(v: float, decimals: int = 2) -> str:
    """Formato para precargar un campo: fijo, sin ceros a la derecha."""
    if not math.isfinite(float(v)):
        return ""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s
