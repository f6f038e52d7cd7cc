"""
Module: output

Purpose:
    Export the render surface as SVG, PNG or a one-page PDF.

Key Functions:
    - export_vector(): export.svg
    - export_raster(): export.png
    - export_document(): export.pdf

Dependencies:
    - fitz (PyMuPDF): SVG rasterization
    - PIL: PNG encoding
    - reportlab: PDF generation

Used By:
    - svg_tiler.controller
"""

from .models import ExportArtifact
from .vector import export_vector
from .raster import export_raster, rasterize_snapshot
from .document import export_document

__all__ = [
    "ExportArtifact",
    "export_vector",
    "export_raster",
    "rasterize_snapshot",
    "export_document",
]
