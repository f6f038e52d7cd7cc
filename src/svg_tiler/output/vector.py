"""
Module: output.vector

Purpose:
    Vector export: the render surface tree serialized verbatim.
"""

from __future__ import annotations

import logging

from svg_tiler.render import RenderSnapshot

from .models import ExportArtifact

logger = logging.getLogger(__name__)

SVG_FILENAME = "export.svg"
SVG_MIME_TYPE = "image/svg+xml"


def export_vector(snapshot: RenderSnapshot) -> ExportArtifact:
    """Serialize the surface document as ``export.svg``."""
    data = snapshot.svg_text.encode("utf-8")
    logger.info(f"Exported SVG with {snapshot.tile_count} tiles ({len(data)} bytes)")
    return ExportArtifact(SVG_FILENAME, SVG_MIME_TYPE, data)
