"""
Module: loading.loader

Purpose:
    Load the source SVG either from the bundled default asset or from a
    user-supplied file. Validates the declared MIME type of uploads.

Key Functions:
    - load_default(): Load the bundled default asset
    - load_upload(): Load a user-supplied file
    - declared_mime_type(): MIME type declared for a file

Key Classes:
    - LoadFailure: Default asset could not be loaded
    - InvalidFormat: Upload is not an SVG document

Dependencies:
    - mimetypes (std)
    - pathlib (std)
    - loading.parser: SVG parsing

Used By:
    - controller: TilerController.load_default / load_upload
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Optional

from svg_tiler.config import DEFAULT_ASSET_PATH
from svg_tiler.core.models import SourceDocument

from .parser import ParseError, parse_document

logger = logging.getLogger(__name__)

SVG_MIME_TYPE = "image/svg+xml"

# Some platforms ship a mimetypes table without .svg
mimetypes.add_type(SVG_MIME_TYPE, ".svg")


class LoadFailure(Exception):
    """Default asset could not be read or parsed."""
    pass


class InvalidFormat(Exception):
    """Uploaded file is not a vector image."""
    pass


def declared_mime_type(path: Path) -> Optional[str]:
    """
    MIME type a file declares through its name.

    Args:
        path: File path

    Returns:
        MIME type string, or None if unknown
    """
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type


def load_default(path: Optional[Path] = None) -> SourceDocument:
    """
    Load the bundled default SVG asset.

    Args:
        path: Override for the asset location (default: package asset)

    Returns:
        Parsed SourceDocument

    Raises:
        LoadFailure: If the asset is missing, unreadable or not SVG
    """
    asset_path = Path(path) if path is not None else DEFAULT_ASSET_PATH

    try:
        text = asset_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadFailure(f"Could not read default asset {asset_path}: {e}") from e

    try:
        document = parse_document(text, name=asset_path.name)
    except ParseError as e:
        raise LoadFailure(f"Default asset {asset_path} is not a valid SVG: {e}") from e

    logger.info(
        f"Loaded default asset {asset_path.name} "
        f"({document.intrinsic_width:g}x{document.intrinsic_height:g})"
    )
    return document


def load_upload(path: Path, mime_type: Optional[str] = None) -> SourceDocument:
    """
    Load a user-supplied SVG file.

    The declared MIME type must be ``image/svg+xml``. When ``mime_type``
    is not given it is guessed from the file name.

    Args:
        path: Uploaded file
        mime_type: MIME type declared by the caller

    Returns:
        Parsed SourceDocument

    Raises:
        InvalidFormat: Wrong MIME type, unreadable file or non-SVG content

    Example:
        >>> load_upload(Path("logo.png"))
        Traceback (most recent call last):
        ...
        InvalidFormat: ...
    """
    path = Path(path)
    declared = mime_type if mime_type is not None else declared_mime_type(path)

    if declared != SVG_MIME_TYPE:
        raise InvalidFormat(f"{path.name} is {declared or 'of unknown type'}, expected {SVG_MIME_TYPE}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidFormat(f"Could not read {path.name}: {e}") from e

    try:
        document = parse_document(text, name=path.name)
    except ParseError as e:
        raise InvalidFormat(f"{path.name} is not a valid SVG document: {e}") from e

    logger.info(
        f"Loaded {path.name} ({document.intrinsic_width:g}x{document.intrinsic_height:g})"
    )
    return document
