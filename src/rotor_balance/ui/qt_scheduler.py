from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer


class QtTickScheduler:
    """
    Scheduler de ticks sobre el event loop de Qt: un QTimer single-shot por tick.
    cancel() es síncrono: el timer detenido no dispara.
    """
    def __init__(self, parent: QObject = None):
        self._parent = parent

    def schedule(self, interval_ms: int, callback: Callable[[], object]) -> QTimer:
        t = QTimer(self._parent)
        t.setSingleShot(True)
        t.timeout.connect(callback)
        t.timeout.connect(t.deleteLater)
        t.start(int(interval_ms))
        return t

    def cancel(self, handle: QTimer):
        handle.stop()
        handle.deleteLater()
