"""
Tests for pie slice geometry.
"""
import math

import pytest

from models.category import Category
from services.category_service import aggregate_expenses
from services.pie_service import START_ANGLE, build_pie_slices
from tests.conftest import make_tx


@pytest.fixture
def breakdown():
    return aggregate_expenses([
        make_tx("rent", 500.0, category=Category.HOUSING),
        make_tx("food", 300.0, category=Category.FOOD),
        make_tx("bus", 200.0, category=Category.TRANSPORT),
    ])


class TestBuildPieSlices:

    def test_empty_breakdown(self):
        assert build_pie_slices(aggregate_expenses([])) == []

    def test_single_slice_spans_full_turn(self):
        slices = build_pie_slices(aggregate_expenses([make_tx("A", 30.0), make_tx("B", 70.0)]))
        assert len(slices) == 1
        assert slices[0].sweep == pytest.approx(math.tau)
        assert slices[0].category is Category.FOOD
        assert slices[0].color_hex == Category.FOOD.color_hex

    def test_sweeps_sum_to_full_turn(self, breakdown):
        slices = build_pie_slices(breakdown)
        assert sum(s.sweep for s in slices) == pytest.approx(math.tau)

    def test_slices_follow_breakdown_order(self, breakdown):
        slices = build_pie_slices(breakdown)
        assert [s.category for s in slices] == [Category.HOUSING, Category.FOOD, Category.TRANSPORT]

    def test_slices_are_contiguous(self, breakdown):
        slices = build_pie_slices(breakdown)
        assert slices[0].start_angle == START_ANGLE
        for prev, cur in zip(slices, slices[1:]):
            assert cur.start_angle == pytest.approx(prev.start_angle + prev.sweep)

    def test_vertices(self, breakdown):
        slices = build_pie_slices(breakdown, center=(100.0, 100.0), radius=50.0, segments=30)
        first = slices[0]
        assert len(first.vertices) == 32
        assert first.vertices[0] == (100.0, 100.0)
        # First arc point sits at 12 o'clock in a y-down frame
        assert first.vertices[1] == pytest.approx((100.0, 50.0))
        # Housing is half the total, so its arc ends at 6 o'clock
        assert first.vertices[-1] == pytest.approx((100.0, 150.0))
        for x, y in first.vertices[1:]:
            assert math.hypot(x - 100.0, y - 100.0) == pytest.approx(50.0)

    def test_segment_count(self, breakdown):
        slices = build_pie_slices(breakdown, segments=90)
        assert all(len(s.vertices) == 92 for s in slices)

    def test_deterministic(self, breakdown):
        assert build_pie_slices(breakdown) == build_pie_slices(breakdown)
