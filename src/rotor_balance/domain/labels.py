from __future__ import annotations

# Clases de estilo del panel de resultados
BALANCED_TAG = "result-balanced"
UNBALANCED_TAG = "result-unbalanced"

TAG_COLORS = {
    BALANCED_TAG: "#27ae60",
    UNBALANCED_TAG: "#c0392b",
}


def verdict_text(balanced: bool) -> str:
    return "Balanced" if balanced else "Unbalanced"


def verdict_tag(balanced: bool) -> str:
    return BALANCED_TAG if balanced else UNBALANCED_TAG


def mass_label(index: int) -> str:
    """Título del grupo de entradas (1-based)."""
    return f"Mass {int(index)}"

