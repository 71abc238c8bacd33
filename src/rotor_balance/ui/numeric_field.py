from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import QLineEdit

from rotor_balance.engine.normalize import format_field, parse_number


class NumericField(QLineEdit):
    """
    Campo numérico de una masa:
    - Acepta SOLO números (con punto o coma)
    - Permite quedar vacío (=> NaN, se evalúa como desbalanceado)
    - `step` se usa con las flechas arriba/abajo
    """
    def __init__(self, parent=None, *, value: float = 0.0, minv: float = -1e18, maxv: float = 1e18,
                 step: float = 0.1, decimals: int = 2):
        super().__init__(parent)
        self.minv = float(minv)
        self.maxv = float(maxv)
        self.step = float(step)
        self.decimals = int(decimals)

        self.setAlignment(Qt.AlignCenter)
        val = QDoubleValidator(self.minv, self.maxv, self.decimals, self)
        val.setNotation(QDoubleValidator.StandardNotation)  # sin científica
        self.setValidator(val)
        self.set_value(value)

    def value(self) -> float:
        return parse_number(self.text())

    def set_value(self, v: float):
        self.setText(format_field(v, self.decimals))

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key_Up, Qt.Key_Down):
            v = self.value()
            if v != v:  # vacío/NaN: arrancar desde el mínimo
                v = self.minv
            v += self.step if event.key() == Qt.Key_Up else -self.step
            self.set_value(min(max(v, self.minv), self.maxv))
            self.editingFinished.emit()
            return
        super().keyPressEvent(event)
