"""
Module: layout.config

Purpose:
    User-tunable tiling parameters. Immutable, validated on
    construction; any combination of in-range values is valid.

Key Classes:
    - LayoutParameters: Immutable tiling configuration
    - ParameterRange: Slider bounds for one parameter

Key Constants:
    - PARAMETER_RANGES: Slider bounds keyed by field name

Dependencies:
    - dataclasses (std)

Used By:
    - layout.engine: compute_placements
    - controller: Current parameter state
    - gui.widgets.control_panel: Slider setup
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, NamedTuple


class ParameterRange(NamedTuple):
    """Slider bounds for one parameter."""
    minimum: float
    maximum: float
    step: float


PARAMETER_RANGES: Dict[str, ParameterRange] = {
    "copies": ParameterRange(1, 20, 1),
    "rows": ParameterRange(1, 100, 1),
    "rotation_degrees": ParameterRange(0, 360, 1),
    "scale": ParameterRange(0.01, 0.50, 0.01),
    "row_offset_px": ParameterRange(-50, 50, 1),
    "horizontal_spacing_factor": ParameterRange(0.0, 1.0, 0.01),
    "vertical_spacing_factor": ParameterRange(0.0, 1.0, 0.01),
}


@dataclass(frozen=True)
class LayoutParameters:
    """
    Tiling parameters (immutable).

    Attributes:
        copies: Tiles per row (>= 1)
        rows: Number of rows (>= 1)
        rotation_degrees: Rotation applied to every tile (0-360)
        scale: Tile size as a fraction of the intrinsic size (> 0)
        row_offset_px: Horizontal shift added per row index (cumulative)
        horizontal_spacing_factor: Multiplier on the horizontal pitch (0-1)
        vertical_spacing_factor: Multiplier on the vertical pitch (0-1)

    Example:
        >>> params = LayoutParameters(copies=3, rows=2)
        >>> params.tile_count
        6
    """

    copies: int = 4
    rows: int = 4
    rotation_degrees: float = 306
    scale: float = 0.17
    row_offset_px: int = 6
    horizontal_spacing_factor: float = 0.89
    vertical_spacing_factor: float = 0.97

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for name in ("copies", "rows", "row_offset_px"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer: {value!r}")
        if self.copies < 1:
            raise ValueError(f"copies must be >= 1: {self.copies}")
        if self.rows < 1:
            raise ValueError(f"rows must be >= 1: {self.rows}")
        if not 0 <= self.rotation_degrees <= 360:
            raise ValueError(f"rotation_degrees must be in [0, 360]: {self.rotation_degrees}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive: {self.scale}")
        if not 0 <= self.horizontal_spacing_factor <= 1:
            raise ValueError(
                f"horizontal_spacing_factor must be in [0, 1]: {self.horizontal_spacing_factor}"
            )
        if not 0 <= self.vertical_spacing_factor <= 1:
            raise ValueError(
                f"vertical_spacing_factor must be in [0, 1]: {self.vertical_spacing_factor}"
            )

    @property
    def tile_count(self) -> int:
        """Total number of tiles (rows * copies)."""
        return self.rows * self.copies

    def with_changes(self, **changes: Any) -> "LayoutParameters":
        """
        Return a copy with the given fields replaced.

        Raises:
            TypeError: If a field name is unknown
            ValueError: If a new value is out of range
        """
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown layout parameter(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def describe(self) -> str:
        """One-line summary shown under the controls."""
        return (
            f"copies={self.copies}; rows={self.rows}; rot={self.rotation_degrees:g}°; "
            f"scale={self.scale:.2f}; offset={self.row_offset_px}px; "
            f"hspace={round(self.horizontal_spacing_factor * 100)}%; "
            f"vspace={round(self.vertical_spacing_factor * 100)}%"
        )
