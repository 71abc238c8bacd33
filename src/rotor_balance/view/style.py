from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class RenderStyle:
    # Superficie de dibujo (pixeles, y hacia abajo)
    canvas_width_px: float = 800.0
    canvas_height_px: float = 400.0

    # Escalas
    px_per_m: float = 600.0          # largo del eje
    radial_px_per_m: float = 100.0   # desplazamiento vertical de las masas

    # Eje
    shaft_x_start_px: float = 100.0
    shaft_lw: float = 10.0
    shaft_color: str = "#555"

    # Apoyos
    support_w_px: float = 40.0
    support_h_px: float = 60.0
    support_color: str = "#888"

    # Masas: bloque + disco
    block_w_px: float = 20.0
    block_h_px: float = 60.0
    disk_radius_px: float = 15.0
    disk_color: str = "black"
    palette: Tuple[str, ...] = ("#e74c3c", "#3498db", "#2ecc71", "#f1c40f")

    # Diagramas por vuelta
    sweep_lw: float = 1.2
    phase_marker_color: str = "black"
    font_size: int = 9

    @property
    def shaft_y_px(self) -> float:
        return self.canvas_height_px / 2.0
