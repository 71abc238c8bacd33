from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from matplotlib.patches import Circle, Rectangle

from rotor_balance.domain.masses import Mass
from rotor_balance.domain.shaft import Shaft
from rotor_balance.view.style import RenderStyle


# -------------------------
# Geometría (pixeles)
# -------------------------
def shaft_pixels(shaft: Shaft, style: RenderStyle) -> float:
    return float(shaft.length_m) * float(style.px_per_m)


def mass_color(index: int, style: RenderStyle = RenderStyle()) -> str:
    """Color cíclico por índice (0-based)."""
    return style.palette[int(index) % len(style.palette)]


def mass_screen_position(mass: Mass, phase_deg: float, shaft: Shaft, style: RenderStyle) -> Optional[Tuple[float, float]]:
    """
    Centro (x, y) del bloque de la masa en pixeles.
    - x: posición axial repartida sobre el largo dibujado del eje
    - y: vista de canto, la masa sube/baja con r·sin(a + φ)
    Devuelve None si la masa tiene datos no finitos.
    """
    if not mass.is_finite():
        return None
    shaft_px = shaft_pixels(shaft, style)
    x = style.shaft_x_start_px + (float(mass.position_m) / float(shaft.axial_span_m)) * shaft_px
    th = math.radians(float(mass.angle_deg) + float(phase_deg))
    y = style.shaft_y_px + float(mass.radius_m) * style.radial_px_per_m * math.sin(th)
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return x, y


# -------------------------
# Dibujo
# -------------------------
def _draw_shaft(ax, shaft: Shaft, style: RenderStyle):
    x0 = style.shaft_x_start_px
    x1 = x0 + shaft_pixels(shaft, style)
    y = style.shaft_y_px

    ax.plot([x0, x1], [y, y], linewidth=style.shaft_lw, color=style.shaft_color, solid_capstyle="butt", zorder=2)

    # Apoyos en ambos extremos
    for xs in (x0, x1):
        ax.add_patch(Rectangle(
            (xs - style.support_w_px / 2.0, y - style.support_h_px / 2.0),
            style.support_w_px,
            style.support_h_px,
            facecolor=style.support_color,
            edgecolor="none",
            zorder=1,
        ))


def _draw_mass(ax, x: float, y: float, color: str, style: RenderStyle):
    ax.add_patch(Rectangle(
        (x - style.block_w_px / 2.0, y - style.block_h_px / 2.0),
        style.block_w_px,
        style.block_h_px,
        facecolor=color,
        edgecolor="none",
        zorder=5,
    ))
    ax.add_patch(Circle((x, y), style.disk_radius_px, facecolor=style.disk_color, edgecolor="none", zorder=6))


def render_rotor(
    ax,
    masses: Iterable[Mass],
    phase_deg: float,
    shaft: Shaft,
    style: RenderStyle = RenderStyle(),
) -> int:
    """
    Limpia y redibuja por completo: eje, apoyos y masas.
    Devuelve la cantidad de masas dibujadas (las no finitas se omiten).
    """
    ax.clear()

    ax.set_xlim(0.0, style.canvas_width_px)
    ax.set_ylim(style.canvas_height_px, 0.0)  # y hacia abajo, como un canvas
    ax.set_aspect("equal", adjustable="box")
    ax.set_axis_off()

    _draw_shaft(ax, shaft, style)

    drawn = 0
    for i, m in enumerate(masses):
        pos = mass_screen_position(m, phase_deg, shaft, style)
        if pos is None:
            continue
        _draw_mass(ax, pos[0], pos[1], mass_color(i, style), style)
        drawn += 1

    ax.text(
        style.canvas_width_px - 10.0, 15.0,
        f"φ = {float(phase_deg) % 360.0:.1f}°",
        ha="right", va="top", fontsize=style.font_size,
    )
    return drawn
