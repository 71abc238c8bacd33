"""
Animation Driver: máquina de dos estados (Stopped / Running).

Colaboradores (duck typing):
  scheduler : schedule(interval_ms, callback) -> handle ; cancel(handle)
  source    : get_masses(count) -> List[Mass] ; regenerate(count)
  render    : render(masses, phase_deg)
  publish   : publish(result)  (None => limpiar resultados)
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, List, Optional

from rotor_balance.config import DEFAULT_CONFIG, SimulationConfig
from rotor_balance.domain.masses import Mass
from rotor_balance.domain.results import BalanceResult
from rotor_balance.domain.state import SimulationState
from rotor_balance.engine.balance import evaluate_balance

logger = logging.getLogger(__name__)


class DriverState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


BUTTON_LABELS = {
    DriverState.STOPPED: "Rotate",
    DriverState.RUNNING: "Stop",
}


class AnimationDriver:
    def __init__(
        self,
        *,
        scheduler: Any,
        source: Any,
        mass_count: Callable[[], int],
        render: Callable[[List[Mass], float], None],
        publish: Callable[[Optional[BalanceResult]], None],
        config: SimulationConfig = DEFAULT_CONFIG,
    ):
        self.scheduler = scheduler
        self.source = source
        self.mass_count = mass_count
        self.render = render
        self.publish = publish
        self.config = config

        self.sim = SimulationState()
        self.last_result: Optional[BalanceResult] = None
        self._listeners: List[Callable[[DriverState], None]] = []

    # -------------------
    # Estado
    # -------------------
    @property
    def state(self) -> DriverState:
        return DriverState.RUNNING if self.sim.running else DriverState.STOPPED

    @property
    def button_label(self) -> str:
        return BUTTON_LABELS[self.state]

    @property
    def phase_deg(self) -> float:
        return self.sim.phase_deg

    def on_state_changed(self, fn: Callable[[DriverState], None]) -> None:
        self._listeners.append(fn)

    def _notify(self) -> None:
        st = self.state
        for fn in list(self._listeners):
            fn(st)

    # -------------------
    # Transiciones
    # -------------------
    def start(self) -> None:
        if self.sim.running:
            return
        self.sim.running = True
        logger.info("Rotación iniciada (fase=%.3f°)", self.sim.phase_deg)
        self._notify()
        self.tick()

    def stop(self) -> None:
        if not self.sim.running:
            return
        self._cancel_pending()
        self.sim.running = False
        logger.info("Rotación detenida (fase=%.3f°, ticks=%d)", self.sim.phase_deg, self.sim.frames)
        self._notify()

    def toggle(self) -> DriverState:
        if self.sim.running:
            self.stop()
        else:
            self.start()
        return self.state

    def reset(self) -> None:
        """
        Válido desde cualquier estado: detiene, fase=0, regenera el formulario,
        dibuja el eje sin masas y limpia resultados.
        """
        self._cancel_pending()
        self.sim.reset()
        self.last_result = None

        n = int(self.mass_count())
        self.source.regenerate(n)
        self.render([], 0.0)
        self.publish(None)

        logger.info("Simulación reiniciada (%d masas)", n)
        self._notify()

    # -------------------
    # Tick
    # -------------------
    def tick(self) -> Optional[BalanceResult]:
        # un tick que llega después de stop() se ignora
        if not self.sim.running:
            return None
        self.sim.handle = None

        phase = self.sim.advance(self.config.phase_step_deg)
        masses = self.source.get_masses(int(self.mass_count()))

        self.render(masses, phase)
        result = evaluate_balance(masses, phase, self.config.tolerance)
        self.last_result = result
        self.publish(result)

        logger.debug(
            "tick %d: fase=%.3f° ΣF=(%.4f, %.4f) ΣM=(%.4f, %.4f)",
            self.sim.frames, phase, result.sum_fx, result.sum_fy, result.sum_mx, result.sum_my,
        )

        if self.sim.running:
            self.sim.handle = self.scheduler.schedule(self.config.tick_interval_ms, self.tick)
        return result

    def _cancel_pending(self) -> None:
        if self.sim.handle is not None:
            self.scheduler.cancel(self.sim.handle)
            self.sim.handle = None
