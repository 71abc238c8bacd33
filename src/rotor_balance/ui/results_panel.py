from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel

from rotor_balance.domain.results import BalanceResult
from rotor_balance.services.results_text import results_html


class ResultsPanel(QLabel):
    """Panel de resultados (texto enriquecido, seleccionable)."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        self.setTextInteractionFlags(Qt.TextSelectableByMouse | Qt.TextSelectableByKeyboard)

    def show_result(self, result: Optional[BalanceResult]):
        self.setText(results_html(result))
