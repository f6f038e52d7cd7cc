"""
Entry point for the PySide6 GUI.
"""
import logging
import sys
from pathlib import Path


def _default_output_dir() -> Path:
    """Downloads folder if present, else the working directory."""
    downloads = Path.home() / "Downloads"
    return downloads if downloads.is_dir() else Path.cwd()


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from svg_tiler.config import TilerConfig
    from svg_tiler.controller import TilerController
    from svg_tiler.gui.main_window import MainWindow

    logging.getLogger("svg_tiler").setLevel(logging.INFO)

    app = QApplication(sys.argv)
    app.setApplicationName("SVG Tiler")
    app.setApplicationDisplayName("SVG Tiler")

    controller = TilerController(TilerConfig(output_dir=_default_output_dir()))
    window = MainWindow(controller)
    window.resize(1280, 800)
    window.show()

    # Default asset is loaded once at startup; failure leaves an empty canvas
    if not controller.load_default():
        window.statusBar().showMessage("Could not load the default SVG")

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
