"""
Module: layout

Purpose:
    Tiling layout engine. Converts a source document and parameter set
    into positioned, rotated, scaled tile placements.

Key Functions:
    - compute_placements(): Main entry point for layout
    - compute_pitch(): Base tile spacing

Key Classes:
    - LayoutParameters: Tiling parameters
    - TilePlacement: One positioned tile

Used By:
    - svg_tiler.controller
"""

from .config import PARAMETER_RANGES, LayoutParameters, ParameterRange
from .models import TilePlacement
from .engine import PITCH_PADDING, compute_pitch, compute_placements, content_bounds

__all__ = [
    # Config
    "LayoutParameters",
    "ParameterRange",
    "PARAMETER_RANGES",
    # Models
    "TilePlacement",
    # Functions
    "PITCH_PADDING",
    "compute_pitch",
    "compute_placements",
    "content_bounds",
]
