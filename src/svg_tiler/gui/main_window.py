"""
Main window: live preview with the control panel, upload and export buttons.
"""
from __future__ import annotations

import logging
import queue
from concurrent.futures import Future
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QByteArray, QTimer, Signal
from PySide6.QtSvgWidgets import QSvgWidget
from PySide6.QtWidgets import (
    QFileDialog, QHBoxLayout, QMainWindow, QMessageBox, QPushButton,
    QVBoxLayout, QWidget,
)

from svg_tiler.controller import TilerController
from svg_tiler.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler, drain_queue
from svg_tiler.gui.widgets.control_panel import ControlPanel
from svg_tiler.output import ExportArtifact

logger = logging.getLogger(__name__)

LOG_POLL_INTERVAL_MS = 200


class PreviewWidget(QSvgWidget):
    """SVG preview that reports its size so the surface can follow it."""

    resized = Signal(int, int)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        size = event.size()
        if size.width() > 0 and size.height() > 0:
            self.resized.emit(size.width(), size.height())


class MainWindow(QMainWindow):
    # artifact (or None), error message (or None)
    export_finished = Signal(object, object)

    def __init__(
        self,
        controller: Optional[TilerController] = None,
        log_queue: Optional[queue.Queue] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.setWindowTitle("SVG Tiler")
        self.controller = controller or TilerController()
        self.controller.set_notice_handler(self._show_notice)
        self.controller.add_listener(self._refresh_preview)
        self.log_queue = log_queue or queue.Queue()
        self.last_saved: Optional[Path] = None

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        self.preview = PreviewWidget()
        self.preview.resized.connect(self.controller.resize_viewport)
        layout.addWidget(self.preview, stretch=3)

        side = QVBoxLayout()
        self.control_panel = ControlPanel(self.controller.parameters)
        self.control_panel.parameterChanged.connect(self._on_parameter_changed)
        side.addWidget(self.control_panel)

        self.upload_button = QPushButton("Upload SVG")
        self.upload_button.clicked.connect(self._on_upload_clicked)
        side.addWidget(self.upload_button)

        exports = QHBoxLayout()
        self.export_svg_button = QPushButton("Export SVG")
        self.export_png_button = QPushButton("Export PNG")
        self.export_pdf_button = QPushButton("Export PDF")
        self.export_svg_button.clicked.connect(self.export_svg)
        self.export_png_button.clicked.connect(self.export_png)
        self.export_pdf_button.clicked.connect(self.export_pdf)
        for button in (self.export_svg_button, self.export_png_button, self.export_pdf_button):
            exports.addWidget(button)
        side.addLayout(exports)
        side.addStretch()

        layout.addLayout(side, stretch=1)
        self.setCentralWidget(central)

        self.export_finished.connect(self._on_export_finished)

        self._log_handler = attach_queue_handler(self.log_queue, "svg_tiler")
        self._log_timer = QTimer(self)
        self._log_timer.timeout.connect(self._drain_logs)
        self._log_timer.start(LOG_POLL_INTERVAL_MS)

    # ─────────────────────────────────────────────────────────────────────────
    # Preview and parameters
    # ─────────────────────────────────────────────────────────────────────────

    def _refresh_preview(self) -> None:
        self.preview.load(QByteArray(self.controller.surface.to_svg().encode("utf-8")))

    def _on_parameter_changed(self, name: str, value: object) -> None:
        try:
            self.controller.set_parameters(**{name: value})
        except ValueError as e:
            logger.warning(f"Ignored {name}={value}: {e}")
            self.control_panel.set_parameters(self.controller.parameters)
            return
        self.control_panel.summary.setText(self.controller.parameters.describe())

    # ─────────────────────────────────────────────────────────────────────────
    # Upload
    # ─────────────────────────────────────────────────────────────────────────

    def _on_upload_clicked(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Upload SVG", "", "SVG files (*.svg);;All files (*)"
        )
        if path:
            self.upload(Path(path))

    def upload(self, path: Path, mime_type: Optional[str] = None) -> bool:
        """Load ``path`` as the new source document."""
        return self.controller.load_upload(path, mime_type)

    def _show_notice(self, message: str) -> None:
        QMessageBox.warning(self, "Invalid file", message)

    # ─────────────────────────────────────────────────────────────────────────
    # Export
    # ─────────────────────────────────────────────────────────────────────────

    def export_svg(self) -> None:
        artifact = self.controller.export_svg()
        if artifact is not None:
            self._save(artifact)

    def export_png(self) -> Future:
        future = self.controller.export_png_async()
        future.add_done_callback(self._emit_export_result)
        return future

    def export_pdf(self) -> Future:
        future = self.controller.export_pdf_async()
        future.add_done_callback(self._emit_export_result)
        return future

    def _emit_export_result(self, future: Future) -> None:
        # Runs on the export worker; the signal hops back to the GUI thread
        error = future.exception()
        if error is not None:
            self.export_finished.emit(None, str(error))
        else:
            self.export_finished.emit(future.result(), None)

    def _on_export_finished(self, artifact: Optional[ExportArtifact], error: Optional[str]) -> None:
        if error is not None:
            QMessageBox.critical(self, "Export failed", error)
            return
        if artifact is not None:
            self._save(artifact)

    def _save(self, artifact: ExportArtifact) -> None:
        try:
            self.last_saved = self.controller.save_artifact(artifact)
        except OSError as e:
            logger.error(f"Could not save {artifact.filename}: {e}")
            QMessageBox.critical(self, "Export failed", str(e))

    # ─────────────────────────────────────────────────────────────────────────
    # Logs
    # ─────────────────────────────────────────────────────────────────────────

    def _drain_logs(self) -> None:
        items = drain_queue(self.log_queue)
        if items:
            message, _level = items[-1]
            self.statusBar().showMessage(message)

    def closeEvent(self, event) -> None:
        self._log_timer.stop()
        detach_queue_handler(self._log_handler, "svg_tiler")
        self.controller.shutdown(wait=False)
        super().closeEvent(event)
