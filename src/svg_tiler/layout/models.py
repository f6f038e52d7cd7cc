"""
Module: layout.models

Purpose:
    Data models for tile layout output.

Key Classes:
    - TilePlacement: Position, rotation and scale of one tile

Dependencies:
    - dataclasses (std)

Used By:
    - layout.engine: Creates TilePlacements
    - render.surface: Draws one tile per placement
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from svg_tiler.core.models import SourceDocument


@dataclass(frozen=True)
class TilePlacement:
    """
    One tile instance on the render surface.

    The tile is sized to the scaled intrinsic size, centered on
    (center_x, center_y), then rotated about that same center.

    Attributes:
        row_index: Row of the tile (0-indexed)
        column_index: Column within the row (0-indexed)
        center_x: X of tile center in surface pixels
        center_y: Y of tile center in surface pixels
        rotation_degrees: Rotation about the tile center
        scale: Fraction of the intrinsic size

    Example:
        >>> placement = TilePlacement(0, 0, 50.0, 50.0, 0.0, 1.0)
        >>> placement.tile_size(doc)
        (100.0, 100.0)
    """

    row_index: int
    column_index: int
    center_x: float
    center_y: float
    rotation_degrees: float
    scale: float

    def tile_size(self, document: SourceDocument) -> Tuple[float, float]:
        """(width, height) of this tile for ``document``."""
        return document.scaled_size(self.scale)

    def top_left(self, document: SourceDocument) -> Tuple[float, float]:
        """Unrotated top-left corner of this tile."""
        width, height = self.tile_size(document)
        return (self.center_x - width / 2, self.center_y - height / 2)
