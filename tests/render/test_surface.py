"""
Tests for render.surface

Test Coverage:
- apply(): one nested copy per placement, transforms, sizes
- reset(): idempotent teardown
- snapshot()/to_svg(): ExportPrecondition before first draw
"""
import xml.etree.ElementTree as ET

import pytest

from svg_tiler.core.models import SVG_NAMESPACE
from svg_tiler.layout import LayoutParameters, compute_placements
from svg_tiler.render import ExportPrecondition, RenderSurface

SVG = f"{{{SVG_NAMESPACE}}}svg"
G = f"{{{SVG_NAMESPACE}}}g"
RECT = f"{{{SVG_NAMESPACE}}}rect"


@pytest.fixture
def surface():
    return RenderSurface(640, 480)


def _draw(surface, document, **params):
    placements = compute_placements(document, LayoutParameters(**params))
    surface.apply(document, placements)
    return placements


class TestRenderSurface:

    def test_starts_uninitialized(self, surface):
        assert not surface.is_initialized
        assert surface.tile_count == 0

    def test_snapshot_before_apply_raises(self, surface):
        with pytest.raises(ExportPrecondition):
            surface.snapshot()
        with pytest.raises(ExportPrecondition):
            surface.to_svg()

    def test_root_has_viewport_size(self, surface, square_document):
        _draw(surface, square_document, copies=1, rows=1)
        root = ET.fromstring(surface.to_svg())
        assert root.tag == SVG
        assert (root.get("width"), root.get("height")) == ("640", "480")

    def test_one_group_per_placement(self, surface, square_document):
        placements = _draw(surface, square_document, copies=3, rows=2)
        root = ET.fromstring(surface.to_svg())
        groups = root.findall(G)
        assert len(groups) == len(placements) == surface.tile_count == 6

    def test_tile_is_sized_centered_and_rotated(self, surface, square_document):
        _draw(
            surface, square_document,
            copies=1, rows=1, scale=0.5, rotation_degrees=30,
        )
        group = ET.fromstring(surface.to_svg()).find(G)
        nested = group.find(SVG)
        # 100x100 at 0.5 -> 50x50 centered at (25, 25)
        assert group.get("transform") == "rotate(30 25 25)"
        assert nested.get("x") == "0"
        assert nested.get("y") == "0"
        assert nested.get("width") == "50"
        assert nested.get("height") == "50"
        assert nested.get("viewBox") == "0 0 100 100"

    def test_rotation_pivot_follows_each_tile(self, surface, square_document):
        placements = _draw(surface, square_document, copies=2, rows=1, scale=0.1,
                           rotation_degrees=90, horizontal_spacing_factor=1)
        groups = ET.fromstring(surface.to_svg()).findall(G)
        second = placements[1]
        assert groups[1].get("transform") == f"rotate(90 {second.center_x:g} {second.center_y:g})"

    def test_nested_copy_of_source_root(self, surface, square_document):
        _draw(surface, square_document, copies=2, rows=2)
        root = ET.fromstring(surface.to_svg())
        for group in root.findall(G):
            inner = group.find(SVG).find(SVG)
            assert inner.get("width") == "100"
            assert inner.find(RECT).get("id") == "square"

    def test_apply_replaces_previous_content(self, surface, square_document):
        _draw(surface, square_document, copies=5, rows=5)
        _draw(surface, square_document, copies=1, rows=2)
        root = ET.fromstring(surface.to_svg())
        assert len(root.findall(G)) == 2
        assert surface.tile_count == 2

    def test_reset_is_idempotent(self, surface, square_document):
        _draw(surface, square_document)
        surface.reset()
        surface.reset()
        assert not surface.is_initialized
        assert surface.tile_count == 0

    def test_resize_updates_root(self, surface, square_document):
        _draw(surface, square_document, copies=1, rows=1)
        surface.resize(300, 200)
        root = ET.fromstring(surface.to_svg())
        assert (root.get("width"), root.get("height")) == ("300", "200")

    def test_resize_rejects_empty_viewport(self, surface):
        with pytest.raises(ValueError):
            surface.resize(0, 100)

    def test_snapshot_captures_state(self, surface, square_document):
        _draw(surface, square_document, copies=2, rows=1)
        snapshot = surface.snapshot()
        _draw(surface, square_document, copies=4, rows=4)
        assert snapshot.tile_count == 2
        assert snapshot.width == 640
        assert len(ET.fromstring(snapshot.svg_text).findall(G)) == 2

    def test_serialized_without_ns_prefixes(self, surface, square_document):
        _draw(surface, square_document, copies=1, rows=1)
        text = surface.to_svg()
        assert "ns0:" not in text
        assert text.startswith("<svg")
