"""
Module: layout.engine

Purpose:
    Map a SourceDocument's intrinsic size and LayoutParameters to the
    ordered list of tile placements. Pure and deterministic; safe to
    call on every parameter change.

Key Functions:
    - compute_placements(): Main entry point for layout
    - compute_pitch(): Base center-to-center spacing
    - content_bounds(): Unrotated bounding box of all tiles

Dependencies:
    - svg_tiler.core.models: SourceDocument
    - layout.config: LayoutParameters

Used By:
    - controller: Recompute on every parameter change
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from svg_tiler.core.models import SourceDocument

from .config import LayoutParameters
from .models import TilePlacement

logger = logging.getLogger(__name__)

# Fixed 20% padding baked into the base pitch before user spacing factors
PITCH_PADDING = 1.2


def compute_pitch(document: SourceDocument, params: LayoutParameters) -> Tuple[float, float]:
    """
    Base (horizontal, vertical) pitch between adjacent tile centers.

    Example:
        >>> doc = SourceDocument(raw="<svg/>", intrinsic_width=100, intrinsic_height=100)
        >>> round(compute_pitch(doc, LayoutParameters(scale=0.17, horizontal_spacing_factor=0.89))[0], 3)
        18.156
    """
    pitch_x = document.intrinsic_width * params.scale * PITCH_PADDING * params.horizontal_spacing_factor
    pitch_y = document.intrinsic_height * params.scale * PITCH_PADDING * params.vertical_spacing_factor
    return (pitch_x, pitch_y)


def compute_placements(
    document: SourceDocument,
    params: LayoutParameters,
) -> List[TilePlacement]:
    """
    Compute every tile placement for a document and parameter set.

    Rows cascade horizontally: row ``r`` is shifted by
    ``r * row_offset_px``. Tiles are not clipped to any viewport.

    Args:
        document: Loaded source document
        params: Tiling parameters

    Returns:
        ``rows * copies`` placements in row-major order (row 0 first).
        Later placements draw on top of earlier ones.

    Example:
        >>> placements = compute_placements(doc, LayoutParameters(copies=3, rows=2))
        >>> [(p.row_index, p.column_index) for p in placements][:4]
        [(0, 0), (0, 1), (0, 2), (1, 0)]
    """
    pitch_x, pitch_y = compute_pitch(document, params)
    tile_width, tile_height = document.scaled_size(params.scale)
    half_width = tile_width / 2
    half_height = tile_height / 2

    placements: List[TilePlacement] = []
    for r in range(params.rows):
        row_offset = r * params.row_offset_px
        center_y = r * pitch_y + half_height

        for i in range(params.copies):
            placements.append(
                TilePlacement(
                    row_index=r,
                    column_index=i,
                    center_x=i * pitch_x + row_offset + half_width,
                    center_y=center_y,
                    rotation_degrees=params.rotation_degrees,
                    scale=params.scale,
                )
            )

    logger.debug(
        f"Computed {len(placements)} placements "
        f"(pitch={pitch_x:.3f}x{pitch_y:.3f}, tile={tile_width:.1f}x{tile_height:.1f})"
    )
    return placements


def content_bounds(
    document: SourceDocument,
    placements: Sequence[TilePlacement],
) -> Optional[Tuple[float, float, float, float]]:
    """
    Unrotated bounding box of all tiles.

    Returns:
        (left, top, right, bottom) or None if there are no placements
    """
    if not placements:
        return None

    lefts, tops, rights, bottoms = [], [], [], []
    for placement in placements:
        width, height = placement.tile_size(document)
        left, top = placement.top_left(document)
        lefts.append(left)
        tops.append(top)
        rights.append(left + width)
        bottoms.append(top + height)

    return (min(lefts), min(tops), max(rights), max(bottoms))
