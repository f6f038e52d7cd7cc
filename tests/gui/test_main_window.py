"""Tests for the main window wiring."""

import logging

import pytest
from PySide6.QtWidgets import QMessageBox

from svg_tiler.config import TilerConfig
from svg_tiler.controller import REJECTION_NOTICE, TilerController
from svg_tiler.gui.main_window import MainWindow


@pytest.fixture
def window(qtbot, tmp_path):
    controller = TilerController(TilerConfig(viewport_width=320, viewport_height=240, output_dir=tmp_path))
    win = MainWindow(controller)
    qtbot.addWidget(win)
    yield win
    controller.shutdown()


class TestMainWindow:

    def test_slider_change_recomputes(self, window, svg_file):
        window.upload(svg_file)
        window.control_panel.sliders["copies"].setValue(0)
        assert window.controller.parameters.copies == 1
        assert len(window.controller.placements) == window.controller.parameters.rows

    def test_summary_follows_parameters(self, window):
        window.control_panel.sliders["rows"].setValue(0)
        assert "rows=1;" in window.control_panel.summary.text()

    def test_invalid_upload_shows_warning(self, window, png_file, monkeypatch):
        shown = []
        monkeypatch.setattr(QMessageBox, "warning", lambda parent, title, text: shown.append(text))
        assert window.upload(png_file) is False
        assert shown == [REJECTION_NOTICE]
        assert window.controller.document is None

    def test_export_svg_before_load_saves_nothing(self, window, tmp_path):
        window.export_svg()
        assert window.last_saved is None
        assert not (tmp_path / "export.svg").exists()

    def test_export_svg_saves_file(self, window, svg_file, tmp_path):
        window.upload(svg_file)
        window.export_svg()
        assert window.last_saved == tmp_path / "export.svg"

    def test_export_png_saves_on_gui_thread(self, window, svg_file, tmp_path, qtbot):
        window.upload(svg_file)
        with qtbot.waitSignal(window.export_finished, timeout=30000):
            window.export_png()
        assert (tmp_path / "export.png").exists()

    def test_logs_reach_status_bar(self, window, svg_file, qtbot):
        logging.getLogger("svg_tiler").setLevel(logging.INFO)
        window.upload(svg_file)
        qtbot.waitUntil(lambda: "square.svg" in window.statusBar().currentMessage(), timeout=2000)
