"""
Module: config

Purpose:
    Application configuration for SVG Tiler. Immutable dataclasses
    with validation on construction.

Key Classes:
    - PdfPageConfig: Page and image placement for the PDF export
    - TilerConfig: Viewport, default asset and output settings

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - controller: TilerController
    - output.document: PDF embedding
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DEFAULT_ASSET_PATH = Path(__file__).resolve().parent / "assets" / "unicorn.svg"

# Preview viewport in pixels
DEFAULT_VIEWPORT_WIDTH = 1280
DEFAULT_VIEWPORT_HEIGHT = 800


@dataclass(frozen=True)
class PdfPageConfig:
    """
    Placement of the raster snapshot on the exported PDF page.

    All values are millimetres measured from the top-left corner
    of a landscape A4 page.

    Attributes:
        image_x_mm: Left offset of the image
        image_y_mm: Top offset of the image
        image_width_mm: Width of the image box
        image_height_mm: Height of the image box

    Example:
        >>> page = PdfPageConfig()
        >>> (page.image_width_mm, page.image_height_mm)
        (280.0, 180.0)
    """

    image_x_mm: float = 10.0
    image_y_mm: float = 10.0
    image_width_mm: float = 280.0
    image_height_mm: float = 180.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.image_width_mm <= 0:
            raise ValueError(f"image_width_mm must be positive: {self.image_width_mm}")
        if self.image_height_mm <= 0:
            raise ValueError(f"image_height_mm must be positive: {self.image_height_mm}")


@dataclass(frozen=True)
class TilerConfig:
    """
    Configuration for the tiling controller (immutable).

    Attributes:
        default_asset_path: SVG loaded at startup
        viewport_width: Render surface width in pixels
        viewport_height: Render surface height in pixels
        output_dir: Directory exported artifacts are saved to (None = cwd)
        pdf_page: Image placement for PDF export

    Example:
        >>> config = TilerConfig(viewport_width=800, viewport_height=600)
        >>> config.viewport_size
        (800, 600)
    """

    default_asset_path: Path = DEFAULT_ASSET_PATH
    viewport_width: int = DEFAULT_VIEWPORT_WIDTH
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT
    output_dir: Optional[Path] = None
    pdf_page: PdfPageConfig = field(default_factory=PdfPageConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.viewport_width <= 0:
            raise ValueError(f"viewport_width must be positive: {self.viewport_width}")
        if self.viewport_height <= 0:
            raise ValueError(f"viewport_height must be positive: {self.viewport_height}")

    @property
    def viewport_size(self) -> tuple[int, int]:
        """(width, height) of the render surface in pixels."""
        return (self.viewport_width, self.viewport_height)
