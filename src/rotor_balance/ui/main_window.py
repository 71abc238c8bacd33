from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from typing import Dict, List, Optional

import matplotlib
matplotlib.use("QtAgg")
import matplotlib.pyplot as plt

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QPushButton, QSizePolicy, QSplitter, QScrollArea, QMessageBox, QFileDialog,
    QComboBox, QDialog, QGroupBox
)
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.lines import Line2D
from matplotlib.transforms import Bbox

from rotor_balance.config import DEFAULT_CONFIG, SimulationConfig
from rotor_balance.domain.masses import Mass, same_masses
from rotor_balance.engine.balance import evaluate_balance
from rotor_balance.engine.driver import AnimationDriver, DriverState
from rotor_balance.engine.sweep import sweep_revolution
from rotor_balance.services.report_pdf import ReportHeader, ReportSnapshot, export_balance_report
from rotor_balance.ui.mass_inputs import MassInputPanel
from rotor_balance.ui.qt_scheduler import QtTickScheduler
from rotor_balance.ui.report_header_dialog import ReportHeaderDialog
from rotor_balance.ui.results_panel import ResultsPanel
from rotor_balance.view.renderer_rotor import render_rotor
from rotor_balance.view.renderer_sweep import move_phase_marker, render_force_sweep, render_moment_sweep
from rotor_balance.view.style import RenderStyle

logger = logging.getLogger(__name__)


# ============================================================
# MAIN WINDOW
# ============================================================
class BalancingApp(QMainWindow):
    def __init__(self, config: SimulationConfig = DEFAULT_CONFIG, mass_count: Optional[int] = None):
        super().__init__()
        self.config = config
        self.style_ = RenderStyle()
        self.shaft = config.shaft()
        self._report_header: Dict[str, str] = {}

        self.setWindowTitle("Static and Dynamic Balancing")
        self.resize(1300, 800)

        root = QWidget()
        self.setCentralWidget(root)
        main = QHBoxLayout(root)
        main.setContentsMargins(8, 8, 8, 8)

        splitter = QSplitter(Qt.Horizontal)
        splitter.setChildrenCollapsible(False)
        splitter.setHandleWidth(8)
        main.addWidget(splitter)

        # LEFT: entradas + controles + resultados
        left_host = QWidget()
        left = QVBoxLayout(left_host)
        left.setContentsMargins(0, 0, 0, 0)
        left.setSpacing(10)

        lo, hi = config.mass_count_range
        n0 = config.clamp_mass_count(config.default_mass_count if mass_count is None else mass_count)

        self.cmb_count = QComboBox()
        self.cmb_count.addItems([str(k) for k in range(lo, hi + 1)])
        self.cmb_count.setCurrentText(str(n0))

        top_form = QFormLayout()
        top_form.addRow("Number of Masses:", self.cmb_count)
        left.addLayout(top_form)

        self.mass_panel = MassInputPanel(count=n0, axial_span_m=config.axial_span_m)
        left.addWidget(self.mass_panel)

        btns = QHBoxLayout()
        self.btn_rotate = QPushButton("Rotate")
        self.btn_reset = QPushButton("Reset")
        btns.addWidget(self.btn_rotate)
        btns.addWidget(self.btn_reset)
        btns.addStretch(1)
        left.addLayout(btns)

        res_box = QGroupBox("Results")
        res_lay = QVBoxLayout(res_box)
        self.results_panel = ResultsPanel()
        res_lay.addWidget(self.results_panel)
        left.addWidget(res_box)
        left.addStretch(1)

        left_scroll = QScrollArea()
        left_scroll.setWidgetResizable(True)
        left_scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        left_scroll.setWidget(left_host)
        left_scroll.setMinimumWidth(340)
        splitter.addWidget(left_scroll)

        # RIGHT: vista del rotor + diagramas por vuelta
        right_container = QWidget()
        right = QVBoxLayout(right_container)
        right.setContentsMargins(0, 0, 0, 0)

        self.fig = plt.Figure()
        gs = self.fig.add_gridspec(3, 1, height_ratios=[1.6, 1.0, 1.0], hspace=0.55)
        self.ax_rotor = self.fig.add_subplot(gs[0, 0])
        self.ax_F = self.fig.add_subplot(gs[1, 0])
        self.ax_M = self.fig.add_subplot(gs[2, 0], sharex=self.ax_F)
        self.fig.subplots_adjust(left=0.08, right=0.98, top=0.97, bottom=0.07)
        self._sweep_masses: Optional[List[Mass]] = None
        self._phase_markers: List[Optional[Line2D]] = []

        self.canvas = FigureCanvas(self.fig)
        self.canvas.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        exp_row = QHBoxLayout()
        self.btn_export_png = QPushButton("Export figure (PNG)")
        self.btn_export_pdf = QPushButton("Export report (PDF)")
        exp_row.addWidget(self.btn_export_png)
        exp_row.addWidget(self.btn_export_pdf)
        exp_row.addStretch(1)

        right.addLayout(exp_row)
        right.addWidget(self.canvas)
        splitter.addWidget(right_container)

        splitter.setSizes([340, 960])
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)

        # Driver
        self.scheduler = QtTickScheduler(self)
        self.driver = AnimationDriver(
            scheduler=self.scheduler,
            source=self.mass_panel,
            mass_count=self.selected_count,
            render=self.render_frame,
            publish=self.results_panel.show_result,
            config=config,
        )
        self.driver.on_state_changed(self._on_driver_state)

        # Señales
        self.cmb_count.currentIndexChanged.connect(lambda _i: self.mass_panel.regenerate(self.selected_count()))
        self.btn_rotate.clicked.connect(lambda _=False: self.driver.toggle())
        self.btn_reset.clicked.connect(lambda _=False: self.driver.reset())
        self.btn_export_png.clicked.connect(self._export_png)
        self.btn_export_pdf.clicked.connect(self._export_report_pdf)

        # Estado inicial: eje sin masas, sin resultados
        self.render_frame([], 0.0)

    def selected_count(self) -> int:
        return self.config.clamp_mass_count(int(self.cmb_count.currentText() or self.config.default_mass_count))

    # -------------------------
    # Dibujo
    # -------------------------
    def render_frame(self, masses: List[Mass], phase_deg: float):
        render_rotor(self.ax_rotor, masses, phase_deg, self.shaft, self.style_)

        # las curvas por vuelta solo dependen de las masas: por tick se mueve el marcador
        if self._sweep_masses is not None and same_masses(masses, self._sweep_masses):
            for marker in self._phase_markers:
                move_phase_marker(marker, phase_deg)
        else:
            sweep = sweep_revolution(masses)
            self._phase_markers = [
                render_force_sweep(self.ax_F, sweep, phase_deg, self.style_),
                render_moment_sweep(self.ax_M, sweep, phase_deg, self.style_),
            ]
            self._sweep_masses = list(masses)

        self.canvas.draw_idle()

    def _on_driver_state(self, state: DriverState):
        self.btn_rotate.setText(self.driver.button_label)

    # -------------------------
    # Exportación
    # -------------------------
    def _current_snapshot(self) -> ReportSnapshot:
        masses = self.mass_panel.get_masses(self.selected_count())
        # se reevalúa con las entradas actuales en la fase actual
        result = evaluate_balance(masses, self.driver.phase_deg, self.config.tolerance)
        sweep = sweep_revolution(masses)
        return ReportSnapshot(
            masses=masses,
            result=result,
            angular_velocity=self.config.angular_velocity,
            max_resultant_force=sweep.max_resultant_force(),
            max_resultant_moment=sweep.max_resultant_moment(),
        )

    def _export_png(self):
        path, _ = QFileDialog.getSaveFileName(self, "Export figure", "rotor.png", "PNG (*.png)")
        if not path:
            return
        if not path.lower().endswith(".png"):
            path += ".png"
        try:
            self.canvas.draw()
            self.fig.savefig(path, dpi=200)
            logger.info("Figura exportada: %s", path)
            QMessageBox.information(self, "Export", f"Exported:\n{path}")
        except Exception as e:
            logger.exception("Error al exportar la figura")
            QMessageBox.critical(self, "Export", f"Export failed: {e}")

    def _export_report_pdf(self):
        was_running = self.driver.state is DriverState.RUNNING
        self.driver.stop()
        try:
            snapshot = self._current_snapshot()

            dlg = ReportHeaderDialog(self, defaults=self._report_header)
            if dlg.exec() != QDialog.DialogCode.Accepted:
                return
            hdr = dlg.values_dict()
            self._report_header = hdr

            path, _ = QFileDialog.getSaveFileName(self, "Export report (PDF)", "balancing_report.pdf", "PDF (*.pdf)")
            if not path:
                return
            if not path.lower().endswith(".pdf"):
                path += ".pdf"

            tmpdir = tempfile.mkdtemp(prefix="rotor_balance_report_")
            try:
                self.canvas.draw()
                renderer = self.canvas.get_renderer()
                inv = self.fig.dpi_scale_trans.inverted()

                path_rotor = os.path.join(tmpdir, "rotor.png")
                self.fig.savefig(path_rotor, dpi=200, bbox_inches=self.ax_rotor.get_tightbbox(renderer).transformed(inv))

                path_sweep = os.path.join(tmpdir, "sweep.png")
                bbox = Bbox.union([self.ax_F.get_tightbbox(renderer), self.ax_M.get_tightbbox(renderer)])
                self.fig.savefig(path_sweep, dpi=200, bbox_inches=bbox.transformed(inv))

                header = ReportHeader(
                    titulo=hdr.get("titulo") or "Static and Dynamic Balancing",
                    autor=hdr.get("autor", ""),
                    curso=hdr.get("curso", ""),
                    observaciones=hdr.get("observaciones", ""),
                )
                export_balance_report(path, header, snapshot, imagenes={"rotor": path_rotor, "sweep": path_sweep})
                QMessageBox.information(self, "Report", f"PDF generated:\n{path}")
            finally:
                shutil.rmtree(tmpdir, ignore_errors=True)

        except Exception as e:
            logger.exception("Error al generar el informe (PDF)")
            QMessageBox.critical(self, "Report", f"Report failed: {e}")
        finally:
            if was_running:
                self.driver.start()


def main(mass_count: Optional[int] = None, config: SimulationConfig = DEFAULT_CONFIG):
    app = QApplication.instance() or QApplication(sys.argv)
    w = BalancingApp(config=config, mass_count=mass_count)
    w.show()
    sys.exit(app.exec())
