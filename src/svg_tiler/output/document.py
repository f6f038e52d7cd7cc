"""
Module: output.document

Purpose:
    Paginated-document export. Rasterizes the render surface and embeds
    the bitmap on a single landscape A4 PDF page using ReportLab. The
    image is stretched into the configured box; content is never
    reflowed onto further pages.

Key Functions:
    - export_document(): RenderSnapshot -> export.pdf artifact

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - output.raster: Rasterization

Used By:
    - controller: PDF export
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from PIL import Image
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from svg_tiler.config import PdfPageConfig
from svg_tiler.render import RenderSnapshot

from .models import ExportArtifact
from .raster import encode_png, rasterize_snapshot

logger = logging.getLogger(__name__)

PDF_FILENAME = "export.pdf"
PDF_MIME_TYPE = "application/pdf"

# Landscape A4 in points
PAGE_WIDTH_PT, PAGE_HEIGHT_PT = landscape(A4)


def export_document(
    snapshot: RenderSnapshot,
    page: Optional[PdfPageConfig] = None,
) -> ExportArtifact:
    """
    Embed a raster of the surface on one landscape A4 page.

    Args:
        snapshot: Captured render surface
        page: Image placement in millimetres (default: 10,10 sized 280x180)

    Returns:
        ``export.pdf`` artifact

    Example:
        >>> artifact = export_document(surface.snapshot())
        >>> artifact.data[:5]
        b'%PDF-'
    """
    page = page or PdfPageConfig()
    image = rasterize_snapshot(snapshot)

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(PAGE_WIDTH_PT, PAGE_HEIGHT_PT))
    _draw_image(c, image, page)
    c.showPage()
    c.save()

    data = buf.getvalue()
    logger.info(
        f"Exported PDF with {image.width}x{image.height} image "
        f"at ({page.image_x_mm:g}, {page.image_y_mm:g}) mm ({len(data)} bytes)"
    )
    return ExportArtifact(PDF_FILENAME, PDF_MIME_TYPE, data)


def _draw_image(c: canvas.Canvas, image: Image.Image, page: PdfPageConfig) -> None:
    """
    Draw ``image`` into the page box.

    PdfPageConfig measures from the top-left; ReportLab's origin is
    bottom-left, so the y coordinate is flipped.
    """
    x_pt = page.image_x_mm * mm
    y_pt = PAGE_HEIGHT_PT - (page.image_y_mm + page.image_height_mm) * mm

    c.drawImage(
        _pil_to_reader(image),
        x_pt,
        y_pt,
        width=page.image_width_mm * mm,
        height=page.image_height_mm * mm,
        mask="auto",
    )


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """Convert PIL image to ReportLab ImageReader via PNG."""
    buf = io.BytesIO(encode_png(img))
    return ImageReader(buf)
