# path: tests/test_report_pdf.py
import math
import os
import tempfile
from datetime import datetime

import pytest
from reportlab.lib import colors

from rotor_balance.domain.masses import Mass, default_mass
from rotor_balance.engine.balance import evaluate_balance
from rotor_balance.services.report_pdf import ReportHeader, ReportSnapshot, _table_style, export_balance_report


def _snapshot(masses):
    return ReportSnapshot(
        masses=masses,
        result=evaluate_balance(masses, phase_deg=30.0),
        angular_velocity=20.0,
        max_resultant_force=0.0,
        max_resultant_moment=0.28,
    )


def test_export_balance_report_creates_file():
    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "informe.pdf")
        header = ReportHeader(titulo="Test Report", autor="Grupo 1", fecha=datetime.now(), observaciones="a < b")
        masses = [default_mass(i) for i in range(1, 5)]

        export_balance_report(out, header, _snapshot(masses), imagenes={"rotor": os.path.join(td, "missing.png")})
        assert os.path.exists(out)
        assert os.path.getsize(out) > 0


def test_export_balance_report_with_nan_mass():
    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "nan.pdf")
        masses = [Mass(mass_kg=math.nan, radius_m=0.2, angle_deg=0.0, position_m=0.0)]
        export_balance_report(out, ReportHeader(titulo="NaN"), _snapshot(masses))
        assert os.path.getsize(out) > 0


def test_export_balance_report_rejects_empty_path():
    with pytest.raises(ValueError):
        export_balance_report("  ", ReportHeader(titulo="x"), _snapshot([default_mass(1)]))


def test_export_balance_report_embeds_figure():
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    with tempfile.TemporaryDirectory() as td:
        png = os.path.join(td, "rotor.png")
        fig, ax = plt.subplots(figsize=(8, 4))
        ax.plot([0, 1], [0, 1])
        fig.savefig(png, dpi=100)
        plt.close(fig)

        hdr = ReportHeader(titulo="Fig", fecha=datetime(2024, 1, 1))
        snap = _snapshot([default_mass(1)])
        plain = os.path.join(td, "plain.pdf")
        with_fig = os.path.join(td, "fig.pdf")
        export_balance_report(plain, hdr, snap)
        export_balance_report(with_fig, hdr, snap, imagenes={"Rotor": png})
        assert os.path.getsize(with_fig) > os.path.getsize(plain)


def test_table_style_colors_verdict_cells():
    cmds = _table_style(key_column=True, verdicts={4: True, 5: False}).getCommands()
    assert ("TEXTCOLOR", (1, 4), (1, 4), colors.green) in cmds
    assert ("TEXTCOLOR", (1, 5), (1, 5), colors.red) in cmds
    assert ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke) in cmds

    header = _table_style(header_rows=1, font_size=9).getCommands()
    assert ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold") in header
    assert ("FONTSIZE", (0, 0), (-1, -1), 9) in header
