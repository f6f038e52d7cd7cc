"""
Tests for layout.config
"""
import pytest

from svg_tiler.layout import PARAMETER_RANGES, LayoutParameters


class TestLayoutParameters:

    def test_defaults(self):
        params = LayoutParameters()
        assert params.copies == 4
        assert params.rows == 4
        assert params.rotation_degrees == 306
        assert params.scale == pytest.approx(0.17)
        assert params.row_offset_px == 6
        assert params.horizontal_spacing_factor == pytest.approx(0.89)
        assert params.vertical_spacing_factor == pytest.approx(0.97)

    def test_tile_count(self):
        assert LayoutParameters(copies=5, rows=3).tile_count == 15

    @pytest.mark.parametrize("changes", [
        {"copies": 0},
        {"rows": 0},
        {"rotation_degrees": -1},
        {"rotation_degrees": 361},
        {"scale": 0},
        {"horizontal_spacing_factor": 1.5},
        {"vertical_spacing_factor": -0.1},
    ])
    def test_out_of_range_raises(self, changes):
        with pytest.raises(ValueError):
            LayoutParameters(**changes)

    @pytest.mark.parametrize("changes", [
        {"copies": 2.5},
        {"rows": 3.0},
        {"row_offset_px": 1.5},
        {"copies": True},
    ])
    def test_non_integer_counts_raise(self, changes):
        with pytest.raises(ValueError, match="must be an integer"):
            LayoutParameters(**changes)

    def test_negative_row_offset_is_valid(self):
        assert LayoutParameters(row_offset_px=-50).row_offset_px == -50

    def test_zero_spacing_is_valid(self):
        params = LayoutParameters(horizontal_spacing_factor=0, vertical_spacing_factor=0)
        assert params.horizontal_spacing_factor == 0

    def test_with_changes_returns_new_instance(self):
        params = LayoutParameters()
        changed = params.with_changes(copies=7)
        assert changed.copies == 7
        assert params.copies == 4

    def test_with_changes_rejects_unknown_field(self):
        with pytest.raises(TypeError, match="colour"):
            LayoutParameters().with_changes(colour="red")

    def test_describe_matches_summary_format(self):
        assert LayoutParameters().describe() == (
            "copies=4; rows=4; rot=306°; scale=0.17; offset=6px; hspace=89%; vspace=97%"
        )


def test_parameter_ranges_cover_every_field():
    assert set(PARAMETER_RANGES) == set(LayoutParameters.__dataclass_fields__)


def test_defaults_sit_inside_slider_ranges():
    params = LayoutParameters()
    for name, bounds in PARAMETER_RANGES.items():
        assert bounds.minimum <= getattr(params, name) <= bounds.maximum
