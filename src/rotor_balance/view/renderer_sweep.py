from __future__ import annotations

from typing import Optional
import numpy as np
from matplotlib.lines import Line2D

from rotor_balance.engine.sweep import RevolutionSweep
from rotor_balance.view.style import RenderStyle


def _symmetric_ylim(ax, *series: np.ndarray, pad: float = 1.15):
    vals = [np.abs(s[np.isfinite(s)]) for s in series if s.size]
    vmax = max((float(np.max(v)) for v in vals if v.size), default=0.0)
    vmax = max(vmax, 0.05)
    ax.set_ylim(-vmax * pad, vmax * pad)


def _phase_marker(ax, phase_deg: Optional[float], style: RenderStyle) -> Optional[Line2D]:
    if phase_deg is None:
        return None
    return ax.axvline(float(phase_deg) % 360.0, linewidth=1.0, linestyle="--", color=style.phase_marker_color)


def move_phase_marker(marker: Optional[Line2D], phase_deg: float) -> None:
    """Mueve el marcador de fase sin redibujar las curvas."""
    if marker is None:
        return
    x = float(phase_deg) % 360.0
    marker.set_xdata([x, x])


def render_force_sweep(ax, sweep: RevolutionSweep, phase_deg: Optional[float] = None,
                       style: RenderStyle = RenderStyle()) -> Optional[Line2D]:
    """Dibuja ΣFx y ΣFy vs φ. Devuelve el marcador de fase (o None)."""
    ax.clear()
    phi, fx, fy, _, _ = sweep.sample(n=361)

    ax.plot(phi, fx, linewidth=style.sweep_lw, label="ΣFx")
    ax.plot(phi, fy, linewidth=style.sweep_lw, label="ΣFy")
    ax.axhline(0.0, linewidth=1.0, color="gray")
    marker = _phase_marker(ax, phase_deg, style)

    ax.set_xlim(0.0, 360.0)
    _symmetric_ylim(ax, fx, fy)

    ax.set_ylabel("ΣF [N]")
    ax.set_title("Fuerza resultante por vuelta", fontsize=style.font_size + 1)
    ax.legend(loc="upper right", fontsize=style.font_size - 1)
    ax.grid(True, alpha=0.25)
    return marker


def render_moment_sweep(ax, sweep: RevolutionSweep, phase_deg: Optional[float] = None,
                        style: RenderStyle = RenderStyle()) -> Optional[Line2D]:
    """Dibuja ΣMx y ΣMy vs φ. Devuelve el marcador de fase (o None)."""
    ax.clear()
    phi, _, _, mx, my = sweep.sample(n=361)

    ax.plot(phi, mx, linewidth=style.sweep_lw, label="ΣMx")
    ax.plot(phi, my, linewidth=style.sweep_lw, label="ΣMy")
    ax.axhline(0.0, linewidth=1.0, color="gray")
    marker = _phase_marker(ax, phase_deg, style)

    ax.set_xlim(0.0, 360.0)
    _symmetric_ylim(ax, mx, my)

    ax.set_ylabel("ΣM [Nm]")
    ax.set_xlabel("φ [°]")
    ax.set_title("Momento resultante por vuelta", fontsize=style.font_size + 1)
    ax.legend(loc="upper right", fontsize=style.font_size - 1)
    ax.grid(True, alpha=0.25)
    return marker
