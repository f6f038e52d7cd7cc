"""SVG Tiler: repeat one SVG document across a rotated, row-offset grid.

Subpackages:
- svg_tiler.loading – source SVG loading and size resolution
- svg_tiler.layout – tile placement engine
- svg_tiler.render – live SVG render surface
- svg_tiler.output – SVG/PNG/PDF exporters
- svg_tiler.gui – PySide6 app
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("svg_tiler")
except PackageNotFoundError:
    # Running from a source checkout (run_gui.py) without an install
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
