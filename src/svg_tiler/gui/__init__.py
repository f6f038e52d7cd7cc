"""PySide6 desktop front-end for SVG Tiler."""
