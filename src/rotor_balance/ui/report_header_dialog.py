# path: src/rotor_balance/ui/report_header_dialog.py
from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)


class ReportHeaderDialog(QDialog):
    """Diálogo para el encabezado del informe PDF. Devuelve strings (vacíos si no se completan)."""

    def __init__(self, parent: Optional[QWidget] = None, defaults: Optional[Dict[str, str]] = None):
        super().__init__(parent)
        self.setWindowTitle("Report header")
        self.setModal(True)

        defaults = defaults or {}

        self._titulo = QLineEdit(defaults.get("titulo", "Static and Dynamic Balancing"))
        self._autor = QLineEdit(defaults.get("autor", ""))
        self._curso = QLineEdit(defaults.get("curso", ""))
        self._obs = QLineEdit(defaults.get("observaciones", ""))

        self._autor.setPlaceholderText("Ej: Grupo 3")
        self._curso.setPlaceholderText("Ej: Mecanismos 2026")
        self._obs.setPlaceholderText("Opcional")

        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)
        form.addRow("Title:", self._titulo)
        form.addRow("Author:", self._autor)
        form.addRow("Course:", self._curso)
        form.addRow("Notes:", self._obs)

        hint = QLabel("These fields go into the PDF header. All optional.")
        hint.setWordWrap(True)

        btns = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        btns.accepted.connect(self.accept)
        btns.rejected.connect(self.reject)

        lay = QVBoxLayout()
        lay.addWidget(hint)
        lay.addLayout(form)
        lay.addWidget(btns)
        self.setLayout(lay)
        self.resize(480, 200)

    def values_dict(self) -> Dict[str, str]:
        return {
            "titulo": self._titulo.text().strip(),
            "autor": self._autor.text().strip(),
            "curso": self._curso.text().strip(),
            "observaciones": self._obs.text().strip(),
        }
