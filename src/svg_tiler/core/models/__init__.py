"""
Core Models Package

Immutable data models passed between the loader, layout engine,
render surface and exporters. All models are frozen dataclasses so
they can be handed to the export worker thread without copying.
"""

from .document import SourceDocument, SVG_NAMESPACE, XLINK_NAMESPACE, local_name

__all__ = [
    "SourceDocument",
    "SVG_NAMESPACE",
    "XLINK_NAMESPACE",
    "local_name",
]
