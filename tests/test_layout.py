"""
Tests for zoom slot placement
"""

import pytest

from spliceview.layout import EvenSlotLayout, SlotPlacement


class TestSlotPlacement:
    """Tests for SlotPlacement"""

    def test_width_and_origin_mid(self):
        placement = SlotPlacement(element=500, slot=(100.0, 240.0), origin=(50.0, 52.0))

        assert placement.width == 140.0
        assert placement.origin_mid == 51.0


class TestEvenSlotLayout:
    """Tests for EvenSlotLayout"""

    def test_slots_keep_requested_width(self):
        placements = EvenSlotLayout().place([100, 500], 1000, 100, 500)

        assert [p.slot for p in placements] == [(100.0, 200.0), (300.0, 400.0)]
        assert [p.element for p in placements] == [100, 500]

    def test_origins_follow_overview_scale(self):
        placements = EvenSlotLayout().place([100, 500], 1000, 100, 500)

        assert placements[0].origin == (50.0, 50.5)
        assert placements[1].origin == (250.0, 250.5)

    def test_slots_shrink_when_row_is_full(self):
        """Test that too many slots share the row without overlapping"""
        placements = EvenSlotLayout().place([1, 2, 3, 4], 10, 100, 200)

        assert [p.width for p in placements] == [50.0] * 4
        assert placements[0].slot[0] == 0.0
        assert placements[-1].slot[1] == 200.0

    def test_slots_do_not_overlap(self):
        placements = EvenSlotLayout().place(list(range(0, 1000, 50)), 1000, 140, 1350)

        for left, right in zip(placements, placements[1:]):
            assert left.slot[1] <= right.slot[0] + 1e-9

    def test_no_elements(self):
        assert EvenSlotLayout().place([], 1000, 140, 1350) == []

    @pytest.mark.parametrize("count", [1, 3, 5])
    def test_slots_stay_inside_row(self, count):
        placements = EvenSlotLayout().place(list(range(count)), 100, 140, 1000)

        assert all(0 <= p.slot[0] <= p.slot[1] <= 1000 for p in placements)
