"""
Unit tests for chart coordinate mapping.

Usage:
    pytest tests/test_chart_geometry.py -v
"""
import pytest

from wellness_engine.chart_geometry import (
    BarRect,
    ChartFrame,
    bar_rects,
    dynamic_max,
    line_path,
    line_points,
)


class TestLineChart:
    """Test mood line geometry (domain 0-10)."""

    def test_seven_points_span_plot(self):
        points = line_points([5, 5, 5, 5, 5, 5, 10])

        assert len(points) == 7
        assert points[0] == (20, 80)
        assert points[-1] == (260, 20)
        xs = [x for x, _ in points]
        assert xs == sorted(xs)
        assert xs[1] - xs[0] == pytest.approx(40)

    def test_zero_maps_to_baseline(self):
        assert line_points([0, 0])[0] == (20, 140)

    def test_single_point_is_centred(self):
        """One point must not divide by zero."""
        assert line_points([10]) == [(140, 20)]

    def test_empty_series(self):
        assert line_points([]) == []
        assert line_path([]) == ""

    def test_custom_frame(self):
        frame = ChartFrame(width=100, height=60, padding=10)
        assert line_points([0, 10], frame=frame) == [(10, 50), (90, 10)]

    def test_non_positive_domain_is_flat(self):
        assert line_points([3, 4], max_value=0) == [(20, 140), (260, 140)]

    def test_path_format(self):
        assert line_path([(20.0, 80.0), (260.0, 80.0)]) == "M 20,80 L 260,80"
        assert line_path([(20.5, 80.25)]) == "M 20.5,80.25"


class TestBarChart:
    """Test session bar geometry (domain 0-dynamic max)."""

    @pytest.mark.parametrize("values,expected", [
        ([], 5),
        ([0, 0, 0, 0, 0, 0], 5),
        ([4], 5),
        ([5], 6),
        ([10, 2], 12),
        ([17], 21),
    ])
    def test_dynamic_max(self, values, expected):
        assert dynamic_max(values) == expected

    def test_bar_layout(self):
        values = [0, 1, 2, 3, 4, 10]
        labels = ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]

        bars = bar_rects(values, labels)

        assert len(bars) == 6
        assert [b.x for b in bars] == pytest.approx([20, 60, 100, 140, 180, 220])
        assert all(b.width == pytest.approx(36) for b in bars)
        assert bars[0].height == 0
        assert bars[0].y == 140
        # max 10 -> domain 12 -> 10/12 of 120px
        assert bars[-1].height == pytest.approx(100)
        assert bars[-1].y == pytest.approx(40)
        assert bars[-1].label == "Jun"

    def test_explicit_max(self):
        bars = bar_rects([5], max_value=10)
        assert bars[0] == BarRect(x=20, y=80, width=236, height=60, value=5, label="")

    def test_zero_max_gives_flat_bars(self):
        bars = bar_rects([3, 4], max_value=0)
        assert all(b.height == 0 and b.y == 140 for b in bars)

    def test_narrow_frame_never_negative_width(self):
        frame = ChartFrame(width=50, height=60, padding=20)
        bars = bar_rects([1, 2, 3], frame=frame)
        assert all(b.width >= 0 for b in bars)

    def test_empty_series(self):
        assert bar_rects([]) == []

    def test_to_dict(self):
        bar = bar_rects([2], labels=["Jun"], max_value=4)[0]
        assert bar.to_dict() == {
            "x": 20, "y": 80, "width": 236, "height": 60, "value": 2, "label": "Jun",
        }
