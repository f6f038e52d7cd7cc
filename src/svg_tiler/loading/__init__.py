"""
Module: loading

Purpose:
    Obtain the source SVG document from the bundled default asset or a
    user upload, and resolve its intrinsic size.

Key Functions:
    - load_default(): Bundled default asset
    - load_upload(): User-supplied file
    - parse_document(): SVG text -> SourceDocument

Key Classes:
    - LoadFailure, InvalidFormat, ParseError

Used By:
    - svg_tiler.controller
"""

from .loader import (
    SVG_MIME_TYPE,
    InvalidFormat,
    LoadFailure,
    declared_mime_type,
    load_default,
    load_upload,
)
from .parser import FALLBACK_SIZE, ParseError, parse_document, parse_length, parse_view_box

__all__ = [
    "SVG_MIME_TYPE",
    "FALLBACK_SIZE",
    "InvalidFormat",
    "LoadFailure",
    "ParseError",
    "declared_mime_type",
    "load_default",
    "load_upload",
    "parse_document",
    "parse_length",
    "parse_view_box",
]
