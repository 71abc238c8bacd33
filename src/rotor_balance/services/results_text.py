from __future__ import annotations

import html
from typing import List, Optional

from rotor_balance.domain.labels import TAG_COLORS, verdict_tag, verdict_text
from rotor_balance.domain.results import BalanceResult


def _fmt3(v: float) -> str:
    # mismo formato que el panel original: 3 decimales fijos ("nan" si no es número)
    return f"{float(v):.3f}"


def result_lines(result: BalanceResult) -> List[str]:
    return [
        f"Sum of Forces in X-direction: {_fmt3(result.sum_fx)} N",
        f"Sum of Forces in Y-direction: {_fmt3(result.sum_fy)} N",
        f"Sum of Moments about X-axis: {_fmt3(result.sum_mx)} Nm",
        f"Sum of Moments about Y-axis: {_fmt3(result.sum_my)} Nm",
        f"Static Balance: {verdict_text(result.statically_balanced)}",
        f"Dynamic Balance: {verdict_text(result.dynamically_balanced)}",
    ]


def _verdict_span(balanced: bool) -> str:
    tag = verdict_tag(balanced)
    color = TAG_COLORS[tag]
    return f'<span class="{tag}" style="color:{color}; font-weight:600">{verdict_text(balanced)}</span>'


def results_html(result: Optional[BalanceResult]) -> str:
    """HTML para el panel de resultados. None => panel vacío."""
    if result is None:
        return ""
    lines = result_lines(result)
    rows = [f"<p>{html.escape(ln)}</p>" for ln in lines[:4]]
    rows.append(f"<p>Static Balance: {_verdict_span(result.statically_balanced)}</p>")
    rows.append(f"<p>Dynamic Balance: {_verdict_span(result.dynamically_balanced)}</p>")
    return "<h2>Results:</h2>\n" + "\n".join(rows)
