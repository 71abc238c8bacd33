# path: src/rotor_balance/services/report_pdf.py
from __future__ import annotations

import html
import logging
import math
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from rotor_balance.domain.labels import mass_label, verdict_text
from rotor_balance.domain.masses import Mass
from rotor_balance.domain.results import BalanceResult

# Nota: este módulo NO depende de Qt. Recibe paths a imágenes ya generadas
# (vista del rotor, diagramas por vuelta) y el resultado ya evaluado.

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportHeader:
    titulo: str
    autor: str = ""
    curso: str = ""
    fecha: Optional[datetime] = None
    observaciones: str = ""


@dataclass(frozen=True)
class ReportSnapshot:
    masses: Sequence[Mass]
    result: BalanceResult
    angular_velocity: float
    max_resultant_force: Optional[float] = None   # en la vuelta completa
    max_resultant_moment: Optional[float] = None


def export_balance_report(
    out_pdf_path: str,
    header: ReportHeader,
    snapshot: ReportSnapshot,
    imagenes: Optional[Dict[str, str]] = None,
    page_size=pagesizes.A4,
) -> None:
    """
    Genera un informe PDF (A4) del estado actual: masas, sumas, veredictos y figuras.
    Claves de imagen reconocidas: "rotor", "sweep".
    """
    if not (out_pdf_path or "").strip():
        raise ValueError("Ruta de salida vacía para el informe PDF.")

    imgs = {(k or "").strip().lower(): (v or "").strip() for k, v in (imagenes or {}).items() if k and v}

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))
    styles.add(ParagraphStyle(name="MonoSmall", parent=styles["BodyText"], fontName="Courier", fontSize=8, leading=10))

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=header.titulo,
    )

    story: List[object] = []

    # ----------------- Encabezado -----------------
    story.append(Paragraph(html.escape(header.titulo), styles["H1c"]))
    story.append(Spacer(1, 4 * mm))

    fecha = header.fecha or datetime.now()
    meta = [
        ["Autor:", header.autor or "-"],
        ["Curso / Grupo:", header.curso or "-"],
        ["Fecha:", fecha.strftime("%Y-%m-%d %H:%M")],
        ["Fase actual [°]:", _f(snapshot.result.phase_deg % 360.0, 2)],
        ["ω del banco [rad/s]:", _f(snapshot.angular_velocity, 2)],
    ]
    t = Table(meta, colWidths=[45 * mm, 135 * mm])
    t.setStyle(_table_style(key_column=True))
    story.append(t)
    story.append(Spacer(1, 5 * mm))

    # ----------------- Modelo -----------------
    story.append(Paragraph("Modelo", styles["Heading2"]))
    eq = [
        "θi = ai + φ ;  fi = mi·ri",
        "ΣFx = Σ fi·cos θi      ΣFy = Σ fi·sin θi",
        "ΣMx = Σ fi·zi·cos θi   ΣMy = Σ fi·zi·sin θi",
        f"Estático: |ΣFx|,|ΣFy| < {snapshot.result.tolerance:g}",
        f"Dinámico: estático y |ΣMx|,|ΣMy| < {snapshot.result.tolerance:g}",
    ]
    for ln in eq:
        story.append(Paragraph(html.escape(ln).replace(" ", "&nbsp;"), styles["MonoSmall"]))
    story.append(Spacer(1, 4 * mm))

    # ----------------- Masas -----------------
    story.append(Paragraph("Masas", styles["Heading2"]))
    rows = [["", "m [kg]", "r [m]", "a [°]", "z [m]", "m·r [kg·m]"]]
    for i, m in enumerate(snapshot.masses, start=1):
        rows.append([
            mass_label(i),
            _f(m.mass_kg, 3),
            _f(m.radius_m, 3),
            _f(m.angle_deg, 1),
            _f(m.position_m, 3),
            _f(m.unbalance, 4),
        ])
    t = Table(rows, repeatRows=1)
    t.setStyle(_table_style(header_rows=1, font_size=9))
    story.append(t)
    story.append(Spacer(1, 4 * mm))

    # ----------------- Resultados -----------------
    res = snapshot.result
    story.append(Paragraph("Resultados", styles["Heading2"]))
    rrows = [
        ["ΣFx [N]", _f(res.sum_fx, 3)],
        ["ΣFy [N]", _f(res.sum_fy, 3)],
        ["ΣMx [Nm]", _f(res.sum_mx, 3)],
        ["ΣMy [Nm]", _f(res.sum_my, 3)],
        ["Balanceo estático", verdict_text(res.statically_balanced)],
        ["Balanceo dinámico", verdict_text(res.dynamically_balanced)],
    ]
    if snapshot.max_resultant_force is not None:
        rrows.append(["|ΣF| máx. en la vuelta [N]", _f(snapshot.max_resultant_force, 3)])
    if snapshot.max_resultant_moment is not None:
        rrows.append(["|ΣM| máx. en la vuelta [Nm]", _f(snapshot.max_resultant_moment, 3)])
    t = Table(rrows, colWidths=[80 * mm, 100 * mm])
    t.setStyle(_table_style(key_column=True, verdicts={4: res.statically_balanced, 5: res.dynamically_balanced}))
    story.append(t)
    story.append(Spacer(1, 4 * mm))

    if header.observaciones:
        story.append(Paragraph("Observaciones", styles["Heading3"]))
        story.append(Paragraph(html.escape(header.observaciones), styles["BodyText"]))
        story.append(Spacer(1, 3 * mm))

    # ----------------- Figuras -----------------
    for key, title in (("rotor", "Vista del rotor"), ("sweep", "Sumas por vuelta")):
        if key not in imgs:
            continue
        story.append(Paragraph(title, styles["Heading3"]))
        path = imgs[key]
        if os.path.exists(path):
            story.append(_figure(path, box_w=180 * mm, box_h=95 * mm))
        else:
            story.append(Paragraph(f"(Sin imagen: '{key}' no existe en disco)", styles["Small"]))
        story.append(Spacer(1, 3 * mm))

    doc.build(story)
    logger.info("Informe PDF generado: %s", out_pdf_path)


# ----------------- helpers -----------------

def _f(v: float, dec: int) -> str:
    v = float(v)
    if not math.isfinite(v):
        return "nan"
    s = f"{v:.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _table_style(
    *,
    header_rows: int = 0,
    key_column: bool = False,
    font_size: int = 10,
    verdicts: Optional[Dict[int, bool]] = None,
) -> TableStyle:
    """
    Estilo común de tablas del informe.
    - header_rows: filas de encabezado en negrita sobre gris
    - key_column: primera columna como rótulo (tablas clave/valor)
    - verdicts: {fila: balanceado} => valor en verde/rojo
    """
    cmds = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    if key_column:
        cmds.append(("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke))
    else:
        cmds.append(("ALIGN", (1, 0), (-1, -1), "CENTER"))
    if header_rows > 0:
        cmds.append(("BACKGROUND", (0, 0), (-1, header_rows - 1), colors.lightgrey))
        cmds.append(("FONTNAME", (0, 0), (-1, header_rows - 1), "Helvetica-Bold"))
    for row, ok in (verdicts or {}).items():
        cmds.append(("TEXTCOLOR", (1, row), (1, row), colors.green if ok else colors.red))
    return TableStyle(cmds)


def _figure(path: str, *, box_w: float, box_h: float) -> Image:
    # "bound": reduce hasta entrar en la caja, sin ampliar ni deformar
    return Image(path, width=box_w, height=box_h, kind="bound")
