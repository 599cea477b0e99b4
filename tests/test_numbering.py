"""Tests for the room numbering allocator."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.floor import Floor, Container, new_container_id
from engine.errors import NumberingExhaustedError
from engine.numbering import (
    allocate_for_floor,
    floor_max_number,
    floor_of_room_number,
    format_room_number,
    next_room_number,
    used_room_numbers,
)


def make_container(floor_num=3, room_info="standard", number="301", active=True):
    return Container(new_container_id(floor_num, room_info, number), room_info, number, 80000, active)


class TestFormatting:
    def test_format_pads_suffix(self):
        assert format_room_number(3, 1) == "301"
        assert format_room_number(3, 12) == "312"
        assert format_room_number(12, 5) == "1205"

    def test_floor_of_room_number(self):
        assert floor_of_room_number("301") == 3
        assert floor_of_room_number("1205") == 12
        assert floor_of_room_number("") is None
        assert floor_of_room_number("B12") is None
        assert floor_of_room_number(None) is None


class TestNextRoomNumber:
    def test_empty_floor_starts_at_base(self):
        assert next_room_number(3, set()) == "301"

    def test_starts_after_floor_max(self):
        assert next_room_number(3, {"301", "302"}, floor_max=302) == "303"

    def test_skips_globally_used_numbers(self):
        assert next_room_number(3, {"301", "302", "304"}) == "303"
        assert next_room_number(3, {"306", "307"}, floor_max=305) == "308"

    def test_accepts_string_floor_max(self):
        assert next_room_number(5, set(), floor_max="507") == "508"

    def test_deterministic(self):
        used = {"401", "403"}
        assert next_room_number(4, used) == next_room_number(4, used)

    def test_sequence_is_unique_and_floor_prefixed(self):
        used = set()
        issued = []
        for _ in range(30):
            number = next_room_number(7, used)
            used.add(number)
            issued.append(number)
        assert len(set(issued)) == 30
        assert all(n.startswith("7") and len(n) == 3 for n in issued)

    def test_overflow_reuses_lowest_gap(self):
        used = {format_room_number(3, s) for s in range(2, 100)}
        assert next_room_number(3, used, floor_max=399) == "301"

    def test_exhausted_floor_raises(self):
        used = {format_room_number(3, s) for s in range(1, 100)}
        with pytest.raises(NumberingExhaustedError) as exc:
            next_room_number(3, used, floor_max=399)
        assert exc.value.floor_num == 3

    def test_never_spills_into_next_floor(self):
        used = {format_room_number(3, s) for s in range(1, 100)}
        with pytest.raises(NumberingExhaustedError):
            next_room_number(3, used | {"400"})


class TestLayoutScans:
    def test_used_numbers_cover_all_floors(self):
        floors = [
            Floor(3, [make_container(number="301"), make_container(room_info="", number="302")]),
            Floor(4, [make_container(4, number="401")]),
        ]
        assert used_room_numbers(floors) == {"301", "302", "401"}

    def test_floor_max_ignores_inactive_and_other_floors(self):
        floors = [
            Floor(3, [make_container(number="301"), make_container(number="305", active=False)]),
            Floor(4, [make_container(4, number="410")]),
        ]
        assert floor_max_number(floors, 3) == 301
        assert floor_max_number(floors, 5) is None

    def test_allocate_for_floor(self):
        floors = [
            Floor(3, [make_container(number="301"), make_container(number="302")]),
            Floor(4, []),
        ]
        assert allocate_for_floor(floors, 3) == "303"
        assert allocate_for_floor(floors, 4) == "401"

    def test_allocate_skips_inactive_number(self):
        floors = [Floor(3, [make_container(number="301"), make_container(number="302", active=False)])]
        assert allocate_for_floor(floors, 3) == "303"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
