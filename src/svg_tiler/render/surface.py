"""
Module: render.surface

Purpose:
    The live drawing target. Holds an SVG document tree with one nested
    copy of the source document per tile placement. Every apply() fully
    rebuilds the tree; there is no diffing.

Key Classes:
    - RenderSurface: Clear-and-rebuild SVG canvas
    - RenderSnapshot: Immutable capture of the surface for export
    - ExportPrecondition: Export requested before anything was drawn

Dependencies:
    - xml.etree.ElementTree (std)
    - svg_tiler.core.models: SourceDocument
    - svg_tiler.layout.models: TilePlacement

Used By:
    - controller: Rebuild on every recompute
    - output: Exporters read RenderSnapshots
"""

from __future__ import annotations

import copy
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional, Sequence

from svg_tiler.core.models import SVG_NAMESPACE, SourceDocument
from svg_tiler.layout.models import TilePlacement

logger = logging.getLogger(__name__)

_SVG = f"{{{SVG_NAMESPACE}}}svg"
_GROUP = f"{{{SVG_NAMESPACE}}}g"


class ExportPrecondition(Exception):
    """Render surface has not been initialized with a document."""
    pass


def _num(value: float) -> str:
    """Compact attribute formatting: 12.5000 -> '12.5', 3.0 -> '3'."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class RenderSnapshot:
    """
    Immutable capture of the render surface.

    Taken when an export is triggered so background rasterization never
    reads a tree that is being rebuilt.

    Attributes:
        svg_text: Serialized surface document
        width: Viewport width in pixels
        height: Viewport height in pixels
        tile_count: Number of tiles drawn
    """

    svg_text: str
    width: int
    height: int
    tile_count: int


class RenderSurface:
    """
    SVG canvas that draws one transformed document copy per placement.

    Each tile is a ``<g transform="rotate(a cx cy)">`` wrapping a nested
    ``<svg>`` viewport sized to the scaled tile and centered on
    (cx, cy). The nested viewport maps the intrinsic size onto the tile,
    and the group rotates it about the tile's own center.

    Example:
        >>> surface = RenderSurface(800, 600)
        >>> surface.apply(document, placements)
        >>> surface.tile_count == len(placements)
        True
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = 0
        self._height = 0
        self._root: Optional[ET.Element] = None
        self._tile_count = 0
        self.resize(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_initialized(self) -> bool:
        """True once a document has been drawn."""
        return self._root is not None

    @property
    def tile_count(self) -> int:
        return self._tile_count

    def resize(self, width: int, height: int) -> None:
        """Set the viewport size in pixels."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive: {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        if self._root is not None:
            self._root.set("width", str(self._width))
            self._root.set("height", str(self._height))

    def reset(self) -> None:
        """Discard all drawn content. Safe to call repeatedly."""
        self._root = None
        self._tile_count = 0

    def apply(self, document: SourceDocument, placements: Sequence[TilePlacement]) -> None:
        """
        Clear the surface and draw one tile per placement, in order.

        Args:
            document: Source document to copy into each tile
            placements: Tile placements; later ones draw on top
        """
        self.reset()

        root = ET.Element(_SVG, {
            "width": str(self._width),
            "height": str(self._height),
        })
        source_root = document.root_element()
        view_box = f"0 0 {_num(document.intrinsic_width)} {_num(document.intrinsic_height)}"

        for placement in placements:
            width, height = placement.tile_size(document)
            left, top = placement.top_left(document)
            cx = _num(placement.center_x)
            cy = _num(placement.center_y)

            group = ET.SubElement(root, _GROUP, {
                "transform": f"rotate({_num(placement.rotation_degrees)} {cx} {cy})",
            })
            nested = ET.SubElement(group, _SVG, {
                "x": _num(left),
                "y": _num(top),
                "width": _num(width),
                "height": _num(height),
                "viewBox": view_box,
            })
            nested.append(copy.deepcopy(source_root))

        self._root = root
        self._tile_count = len(placements)
        logger.debug(f"Drew {self._tile_count} tiles on {self._width}x{self._height} surface")

    def to_svg(self) -> str:
        """
        Serialize the current surface tree.

        Raises:
            ExportPrecondition: If nothing has been drawn
        """
        if self._root is None:
            raise ExportPrecondition("Render surface is not initialized")
        return ET.tostring(self._root, encoding="unicode")

    def snapshot(self) -> RenderSnapshot:
        """
        Capture the surface for export.

        Raises:
            ExportPrecondition: If nothing has been drawn
        """
        return RenderSnapshot(
            svg_text=self.to_svg(),
            width=self._width,
            height=self._height,
            tile_count=self._tile_count,
        )
