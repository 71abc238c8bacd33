from __future__ import annotations

from typing import List

from PySide6.QtWidgets import QFormLayout, QGroupBox, QVBoxLayout, QWidget

from rotor_balance.config import DEFAULT_CONFIG
from rotor_balance.domain.labels import mass_label
from rotor_balance.domain.masses import Mass, default_mass
from rotor_balance.engine.normalize import masses_from_rows
from rotor_balance.ui.numeric_field import NumericField


class MassGroup(QGroupBox):
    """Grupo de 4 campos de una masa (valores precargados por índice)."""
    def __init__(self, index: int, parent=None, *, axial_span_m: float = DEFAULT_CONFIG.axial_span_m):
        super().__init__(f"{mass_label(index)}:", parent)
        self.index = int(index)
        d = default_mass(self.index)

        self.f_mass = NumericField(self, value=d.mass_kg, minv=0.1, step=0.1)
        self.f_radius = NumericField(self, value=d.radius_m, minv=0.1, step=0.1)
        self.f_angle = NumericField(self, value=d.angle_deg, minv=0.0, maxv=360.0, step=1.0, decimals=1)
        self.f_position = NumericField(self, value=d.position_m, minv=0.0, maxv=float(axial_span_m), step=0.1)

        form = QFormLayout(self)
        form.addRow("Mass (kg):", self.f_mass)
        form.addRow("Radius (m):", self.f_radius)
        form.addRow("Angle (°):", self.f_angle)
        form.addRow("Axial Position (m):", self.f_position)

    def texts(self) -> List[str]:
        return [f.text() for f in (self.f_mass, self.f_radius, self.f_angle, self.f_position)]


class MassInputPanel(QWidget):
    """
    Colaborador de entradas: regenerate(count) y get_masses(count).
    Las masas se leen de los campos en cada llamada (sin cache).
    """
    def __init__(self, parent=None, count: int = 4, axial_span_m: float = DEFAULT_CONFIG.axial_span_m):
        super().__init__(parent)
        self.axial_span_m = float(axial_span_m)
        self._groups: List[MassGroup] = []
        self._lay = QVBoxLayout(self)
        self._lay.setContentsMargins(0, 0, 0, 0)
        self._lay.setSpacing(8)
        self.regenerate(count)

    def regenerate(self, count: int):
        for g in self._groups:
            self._lay.removeWidget(g)
            g.deleteLater()
        self._groups = []

        for i in range(1, int(count) + 1):
            g = MassGroup(i, self, axial_span_m=self.axial_span_m)
            self._lay.addWidget(g)
            self._groups.append(g)

    def get_masses(self, count: int) -> List[Mass]:
        return masses_from_rows([g.texts() for g in self._groups[: int(count)]])
