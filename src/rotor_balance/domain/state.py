from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class SimulationState:
    """
    Estado de la simulación, propiedad del AnimationDriver.
    Es el único estado mutable del modelo: fase actual, marcha/parada y el
    handle del próximo tick pendiente.
    """
    phase_deg: float = 0.0
    running: bool = False
    handle: Optional[Any] = None
    frames: int = 0

    def advance(self, step_deg: float) -> float:
        self.phase_deg += float(step_deg)
        self.frames += 1
        return self.phase_deg

    def reset(self) -> None:
        self.phase_deg = 0.0
        self.running = False
        self.handle = None
        self.frames = 0
