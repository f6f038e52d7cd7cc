"""
Module: output.raster

Purpose:
    Raster export. Rasterizes the render surface SVG with PyMuPDF at
    the viewport's pixel size, keeping transparency (no background
    fill), and encodes the result as PNG.

Key Functions:
    - rasterize_snapshot(): RenderSnapshot -> RGBA PIL image
    - export_raster(): RenderSnapshot -> export.png artifact

Dependencies:
    - fitz (PyMuPDF): SVG rendering
    - PIL: Image handling and PNG encoding

Used By:
    - output.document: PDF embedding
    - controller: PNG export
"""

from __future__ import annotations

import io
import logging

import fitz
from PIL import Image

from svg_tiler.render import RenderSnapshot

from .models import ExportArtifact

logger = logging.getLogger(__name__)

PNG_FILENAME = "export.png"
PNG_MIME_TYPE = "image/png"


def rasterize_snapshot(snapshot: RenderSnapshot) -> Image.Image:
    """
    Render a snapshot to an RGBA image of exactly width x height pixels.

    Args:
        snapshot: Captured render surface

    Returns:
        RGBA PIL Image with transparent background

    Example:
        >>> image = rasterize_snapshot(surface.snapshot())
        >>> image.mode
        'RGBA'
    """
    with fitz.open(stream=snapshot.svg_text.encode("utf-8"), filetype="svg") as doc:
        page = doc[0]
        matrix = fitz.Matrix(
            snapshot.width / page.rect.width,
            snapshot.height / page.rect.height,
        )
        pix = page.get_pixmap(matrix=matrix, alpha=True)
        image = Image.frombytes("RGBA", (pix.width, pix.height), pix.samples)

    # Rounding of the page rect can leave a 1px difference
    if image.size != (snapshot.width, snapshot.height):
        logger.debug(f"Adjusting raster from {image.size} to {snapshot.width}x{snapshot.height}")
        image = image.crop((0, 0, snapshot.width, snapshot.height))

    return image


def encode_png(image: Image.Image) -> bytes:
    """Encode a PIL image as PNG bytes."""
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def export_raster(snapshot: RenderSnapshot) -> ExportArtifact:
    """Rasterize the surface and encode it as ``export.png``."""
    image = rasterize_snapshot(snapshot)
    data = encode_png(image)
    logger.info(f"Exported PNG {image.width}x{image.height} ({len(data)} bytes)")
    return ExportArtifact(PNG_FILENAME, PNG_MIME_TYPE, data)
