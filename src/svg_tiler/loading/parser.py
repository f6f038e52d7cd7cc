"""
Module: loading.parser

Purpose:
    Parse SVG text into a SourceDocument. Resolves the intrinsic size
    used by the layout engine's spacing math.

Key Functions:
    - parse_document(): Parse SVG text and resolve intrinsic size
    - parse_view_box(): Parse a viewBox attribute
    - parse_length(): Leading numeric value of a length attribute

Key Classes:
    - ParseError: Text is not an SVG document

Dependencies:
    - xml.etree.ElementTree (std)
    - svg_tiler.core.models: SourceDocument

Used By:
    - loading.loader: Default and uploaded documents
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Optional, Tuple

from svg_tiler.core.models import SourceDocument, local_name

logger = logging.getLogger(__name__)

# Size used when neither width/height nor viewBox yield a usable value
FALLBACK_SIZE = 100.0

# Leading number of an attribute value, e.g. "120px" -> 120, "50%" -> 50
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_VIEW_BOX_SEPARATOR = re.compile(r"[\s,]+")


class ParseError(Exception):
    """Text could not be parsed as an SVG document."""
    pass


def parse_length(value: Optional[str]) -> Optional[float]:
    """
    Read the leading numeric part of a length attribute.

    Units and trailing text are ignored. Zero or negative values count as
    unusable so the caller falls through to the next size source.

    Args:
        value: Raw attribute value or None

    Returns:
        Positive float, or None if missing, non-numeric or not positive

    Example:
        >>> parse_length("120px")
        120.0
        >>> parse_length("auto") is None
        True
    """
    if value is None:
        return None
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return None
    number = float(match.group(1))
    if number <= 0:
        return None
    return number


def parse_view_box(value: Optional[str]) -> Optional[Tuple[float, float, float, float]]:
    """
    Parse ``viewBox="minX minY width height"``.

    Args:
        value: Raw attribute value or None

    Returns:
        4-tuple of floats, or None if missing or malformed
    """
    if not value:
        return None
    parts = [p for p in _VIEW_BOX_SEPARATOR.split(value.strip()) if p]
    if len(parts) != 4:
        logger.debug(f"Ignoring malformed viewBox: {value!r}")
        return None
    try:
        min_x, min_y, width, height = (float(p) for p in parts)
    except ValueError:
        logger.debug(f"Ignoring non-numeric viewBox: {value!r}")
        return None
    return (min_x, min_y, width, height)


def resolve_intrinsic_size(
    root: ET.Element,
    view_box: Optional[Tuple[float, float, float, float]],
) -> Tuple[float, float]:
    """
    Resolve (width, height) with precedence width/height attr, viewBox, 100.

    Each dimension falls through independently.
    """
    vb_width = view_box[2] if view_box and view_box[2] > 0 else None
    vb_height = view_box[3] if view_box and view_box[3] > 0 else None

    width = parse_length(root.get("width")) or vb_width or FALLBACK_SIZE
    height = parse_length(root.get("height")) or vb_height or FALLBACK_SIZE
    return (width, height)


def parse_document(text: str, name: str = "") -> SourceDocument:
    """
    Parse SVG text into a SourceDocument.

    Args:
        text: Full SVG document text
        name: Origin label stored on the document

    Returns:
        SourceDocument with resolved intrinsic size

    Raises:
        ParseError: If the text is not well-formed XML or the root is not <svg>

    Example:
        >>> doc = parse_document('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 40 20"/>')
        >>> (doc.intrinsic_width, doc.intrinsic_height)
        (40.0, 20.0)
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseError(f"Malformed XML: {e}") from e

    if local_name(root.tag) != "svg":
        raise ParseError(f"Root element is <{local_name(root.tag)}>, expected <svg>")

    view_box = parse_view_box(root.get("viewBox"))
    width, height = resolve_intrinsic_size(root, view_box)

    logger.debug(f"Parsed {name or 'document'}: {width:g}x{height:g} (viewBox={view_box})")

    return SourceDocument(
        raw=text,
        intrinsic_width=width,
        intrinsic_height=height,
        view_box=view_box,
        name=name,
    )
