"""
Module: render

Purpose:
    Render surface holding the current tiled composite as an SVG tree.

Key Classes:
    - RenderSurface: Clear-and-rebuild SVG canvas
    - RenderSnapshot: Immutable capture for exporters
    - ExportPrecondition: Export before first draw

Used By:
    - svg_tiler.controller
    - svg_tiler.output
"""

from .surface import ExportPrecondition, RenderSnapshot, RenderSurface

__all__ = [
    "ExportPrecondition",
    "RenderSnapshot",
    "RenderSurface",
]
