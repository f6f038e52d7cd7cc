"""
Module: document

Purpose:
    Provides the SourceDocument dataclass - the loaded SVG image with
    its resolved intrinsic size. Replaced wholesale on every load; never
    mutated by downstream stages.

Key Functions:
    - SourceDocument.root_element(): Fresh parsed copy of the <svg> root
    - SourceDocument.scaled_size(scale): Tile size at a given scale

Dependencies:
    - dataclasses (std)
    - xml.etree.ElementTree (std)

Used By:
    - loading.parser: Builds SourceDocument from text
    - layout.engine: Reads intrinsic size
    - render.surface: Nests copies of the root element
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional, Tuple

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

# Serialize SVG elements without ns0: prefixes
ET.register_namespace("", SVG_NAMESPACE)
ET.register_namespace("xlink", XLINK_NAMESPACE)


def local_name(tag: str) -> str:
    """Strip the {namespace} prefix from an ElementTree tag."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


@dataclass(frozen=True)
class SourceDocument:
    """
    Loaded vector image (immutable).

    Attributes:
        raw: Serialized SVG text exactly as loaded
        intrinsic_width: Width resolved from width attr, viewBox, or 100
        intrinsic_height: Height resolved from height attr, viewBox, or 100
        view_box: (min_x, min_y, width, height) if a usable viewBox exists
        name: Where the document came from (file name)

    Example:
        >>> doc = SourceDocument(raw="<svg/>", intrinsic_width=100, intrinsic_height=100)
        >>> doc.scaled_size(0.5)
        (50.0, 50.0)
    """

    raw: str
    intrinsic_width: float
    intrinsic_height: float
    view_box: Optional[Tuple[float, float, float, float]] = None
    name: str = ""

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if self.intrinsic_width <= 0:
            raise ValueError(f"intrinsic_width must be positive: {self.intrinsic_width}")
        if self.intrinsic_height <= 0:
            raise ValueError(f"intrinsic_height must be positive: {self.intrinsic_height}")

    def root_element(self) -> ET.Element:
        """Parse and return a fresh copy of the document's root element."""
        return ET.fromstring(self.raw)

    def scaled_size(self, scale: float) -> Tuple[float, float]:
        """Size of one tile rendered at ``scale``."""
        return (self.intrinsic_width * scale, self.intrinsic_height * scale)
