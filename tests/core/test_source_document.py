"""
Tests for core.models.document
"""
from dataclasses import FrozenInstanceError

import pytest

from svg_tiler.core.models import SVG_NAMESPACE, SourceDocument, local_name


class TestSourceDocument:

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError, match="intrinsic_width"):
            SourceDocument(raw="<svg/>", intrinsic_width=0, intrinsic_height=10)
        with pytest.raises(ValueError, match="intrinsic_height"):
            SourceDocument(raw="<svg/>", intrinsic_width=10, intrinsic_height=-1)

    def test_scaled_size(self):
        doc = SourceDocument(raw="<svg/>", intrinsic_width=200, intrinsic_height=50)
        assert doc.scaled_size(0.5) == (100.0, 25.0)

    def test_root_element_returns_fresh_copy(self, square_document):
        """Mutating one parsed root must not affect the next."""
        first = square_document.root_element()
        first.set("width", "999")
        second = square_document.root_element()
        assert second.get("width") == "100"

    def test_is_immutable(self, square_document):
        with pytest.raises(FrozenInstanceError):
            square_document.intrinsic_width = 5


def test_local_name_strips_namespace():
    assert local_name(f"{{{SVG_NAMESPACE}}}svg") == "svg"
    assert local_name("svg") == "svg"
