"""Tests for derived inventory views."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room_type import RoomType
from models.floor import Floor, Container, new_container_id
from engine.inventory import derive_floor_plan, get_floor_summary, get_room_type_summary, total_rooms


def make_room_type(name="standard", price=80000, numbers=None):
    return RoomType(room_info=name, price=price, room_numbers=list(numbers or []))


def make_container(floor_num=3, room_info="standard", number="301", active=True):
    return Container(new_container_id(floor_num, room_info, number), room_info, number, 80000, active)


class TestTotals:
    def test_total_rooms_sums_stock(self):
        room_types = [make_room_type(numbers=["301", "302"]), make_room_type("deluxe", numbers=["401"])]
        assert total_rooms(room_types) == 3
        assert total_rooms([]) == 0


class TestDeriveFloorPlan:
    def test_counts_and_start_numbers(self):
        room_types = [make_room_type(numbers=["302", "301", "410"])]
        derived = derive_floor_plan(room_types)
        assert derived[0].floor_settings == {3: 2, 4: 1}
        assert derived[0].start_room_numbers == {3: "301", 4: "410"}
        assert room_types[0].floor_settings == {}

    def test_empty_type_clears_plan(self):
        rt = make_room_type()
        rt.floor_settings = {3: 5}
        rt.start_room_numbers = {3: "301"}
        derived = derive_floor_plan([rt])
        assert derived[0].floor_settings == {}
        assert derived[0].start_room_numbers == {}


class TestSummaries:
    def test_room_type_summary(self):
        room_types = [make_room_type(numbers=["301", "401"]), make_room_type("deluxe", numbers=["302", "303"])]
        summary = get_room_type_summary(room_types)
        assert summary[0]["stock"] == 2
        assert summary[0]["floors"] == [3, 4]
        assert abs(summary[1]["share_pct"] - 0.5) < 0.01

    def test_floor_summary(self):
        floors = [Floor(3, [
            make_container(number="301"),
            make_container(room_info="Deluxe", number="302"),
            make_container(room_info="", number="303"),
            make_container(number="304", active=False),
        ])]
        summary = get_floor_summary(floors)[0]
        assert summary["room_count"] == 4
        assert summary["active_count"] == 3
        assert summary["inactive_count"] == 1
        assert summary["unassigned_count"] == 1
        assert summary["room_types"] == {"standard": 1, "deluxe": 1}
        assert summary["first_room"] == "301"
        assert summary["last_room"] == "304"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
