"""
Tests for loading.loader

Test Coverage:
- Bundled default asset
- LoadFailure for missing/invalid default assets
- MIME validation of uploads (InvalidFormat)
"""
from pathlib import Path

import pytest

from svg_tiler.config import DEFAULT_ASSET_PATH
from svg_tiler.loading import (
    SVG_MIME_TYPE,
    InvalidFormat,
    LoadFailure,
    declared_mime_type,
    load_default,
    load_upload,
)


class TestLoadDefault:

    def test_bundled_asset_loads(self):
        doc = load_default()
        assert doc.name == DEFAULT_ASSET_PATH.name
        assert (doc.intrinsic_width, doc.intrinsic_height) == (200.0, 200.0)

    def test_missing_asset_raises_load_failure(self, tmp_path):
        with pytest.raises(LoadFailure, match="Could not read"):
            load_default(tmp_path / "missing.svg")

    def test_unparseable_asset_raises_load_failure(self, tmp_path):
        path = tmp_path / "broken.svg"
        path.write_text("<svg", encoding="utf-8")
        with pytest.raises(LoadFailure, match="not a valid SVG"):
            load_default(path)


class TestLoadUpload:

    def test_svg_file_is_accepted(self, svg_file, square_svg):
        doc = load_upload(svg_file)
        assert doc.raw == square_svg
        assert doc.name == "square.svg"

    def test_declared_png_is_rejected(self, png_file):
        with pytest.raises(InvalidFormat, match="image/png"):
            load_upload(png_file)

    def test_explicit_mime_type_overrides_file_name(self, svg_file):
        """A caller-declared MIME type is what gets validated."""
        with pytest.raises(InvalidFormat):
            load_upload(svg_file, mime_type="image/png")

    def test_explicit_svg_mime_type_accepts_any_name(self, tmp_path, square_svg):
        path = tmp_path / "drawing.txt"
        path.write_text(square_svg, encoding="utf-8")
        doc = load_upload(path, mime_type=SVG_MIME_TYPE)
        assert doc.intrinsic_width == 100.0

    def test_svg_named_file_with_non_svg_content_is_rejected(self, tmp_path):
        path = tmp_path / "fake.svg"
        path.write_text("<html/>", encoding="utf-8")
        with pytest.raises(InvalidFormat, match="not a valid SVG"):
            load_upload(path)

    def test_missing_file_is_rejected(self, tmp_path):
        with pytest.raises(InvalidFormat, match="Could not read"):
            load_upload(tmp_path / "nope.svg")


def test_declared_mime_type():
    assert declared_mime_type(Path("a.svg")) == SVG_MIME_TYPE
    assert declared_mime_type(Path("a.png")) == "image/png"
    assert declared_mime_type(Path("a")) is None
