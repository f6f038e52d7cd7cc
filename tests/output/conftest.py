import pytest

from svg_tiler.layout import LayoutParameters, compute_placements
from svg_tiler.render import RenderSurface


@pytest.fixture
def single_tile_snapshot(square_document):
    """One unrotated 50x50 red square in the top-left of a 200x100 surface."""
    surface = RenderSurface(200, 100)
    params = LayoutParameters(copies=1, rows=1, scale=0.5, rotation_degrees=0)
    surface.apply(square_document, compute_placements(square_document, params))
    return surface.snapshot()


@pytest.fixture
def grid_snapshot(square_document):
    """Default 4x4 grid on a 320x240 surface."""
    surface = RenderSurface(320, 240)
    surface.apply(square_document, compute_placements(square_document, LayoutParameters()))
    return surface.snapshot()
