"""Tests for save validation, invariant checks and sheet validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd

from models.room_type import RoomType
from models.floor import Floor, Container, new_container_id
from data.validator import check_inventory_invariants, validate_for_save, validate_room_type_sheet
from data.sample_data import generate_room_types_df


def make_room_type(name="standard", price=80000, numbers=None):
    return RoomType(room_info=name, price=price, room_numbers=list(numbers or []))


def make_container(floor_num=3, room_info="standard", number="301", active=True):
    return Container(new_container_id(floor_num, room_info, number), room_info, number, 80000, active)


class TestValidateForSave:
    def test_valid_inventory(self):
        result = validate_for_save([make_room_type(numbers=["301"])])
        assert result.is_valid
        assert result.errors == []

    def test_type_without_rooms_is_refused(self):
        result = validate_for_save([make_room_type(numbers=["301"]), make_room_type("deluxe")])
        assert not result.is_valid
        assert any("deluxe" in e for e in result.errors)

    def test_duplicate_and_blank_names(self):
        result = validate_for_save([
            make_room_type("Standard", numbers=["301"]),
            make_room_type("standard ", numbers=["302"]),
            make_room_type(" ", numbers=["303"]),
        ])
        assert not result.is_valid
        assert len(result.errors) == 2

    def test_no_room_types(self):
        assert not validate_for_save([]).is_valid

    def test_missing_price_is_a_warning(self):
        result = validate_for_save([make_room_type(price=0, numbers=["301"])])
        assert result.is_valid
        assert len(result.warnings) == 1


class TestInventoryInvariants:
    def test_consistent_inventory(self):
        floors = [Floor(3, [make_container(number="301"), make_container(room_info="deluxe", number="302")])]
        room_types = [make_room_type(numbers=["301"]), make_room_type("deluxe", numbers=["302"])]
        assert check_inventory_invariants(room_types, floors).is_valid

    def test_room_missing_from_type(self):
        floors = [Floor(3, [make_container(number="301")])]
        result = check_inventory_invariants([make_room_type()], floors)
        assert not result.is_valid

    def test_orphan_number_in_type(self):
        floors = [Floor(3, [make_container(number="301")])]
        result = check_inventory_invariants([make_room_type(numbers=["301", "302"])], floors)
        assert not result.is_valid
        assert any("302" in e for e in result.errors)

    def test_inactive_room_must_not_be_listed(self):
        floors = [Floor(3, [make_container(number="301", active=False)])]
        assert not check_inventory_invariants([make_room_type(numbers=["301"])], floors).is_valid
        assert check_inventory_invariants([make_room_type()], floors).is_valid

    def test_number_under_two_types(self):
        floors = [Floor(3, [make_container(number="301")])]
        room_types = [make_room_type(numbers=["301"]), make_room_type("deluxe", numbers=["301"])]
        assert not check_inventory_invariants(room_types, floors).is_valid

    def test_duplicate_room_across_floors(self):
        floors = [Floor(3, [make_container(number="301")]), Floor(4, [make_container(4, number="301")])]
        assert not check_inventory_invariants([make_room_type(numbers=["301"])], floors).is_valid

    def test_unsorted_floor_and_type(self):
        floors = [Floor(3, [make_container(number="302"), make_container(number="301")])]
        room_types = [make_room_type(numbers=["302", "301"])]
        result = check_inventory_invariants(room_types, floors)
        assert not result.is_valid
        assert len(result.errors) == 2


class TestRoomTypeSheet:
    def test_sample_sheet_is_valid(self):
        assert validate_room_type_sheet(generate_room_types_df()).is_valid

    def test_missing_columns(self):
        result = validate_room_type_sheet(pd.DataFrame({"Room Type": ["standard"]}))
        assert not result.is_valid

    def test_bad_rows(self):
        df = pd.DataFrame({
            "Room Type": ["standard", "Standard", "twin"],
            "Price": [80000, 90000, -1],
            "Room Numbers": ["301, 302", "303", "302, 3A"],
        })
        result = validate_room_type_sheet(df)
        assert not result.is_valid
        messages = " ".join(result.errors)
        assert "Duplicate" in messages
        assert "negative" in messages
        assert "3A" in messages
        assert "302" in messages

    def test_missing_room_numbers_column_warns(self):
        df = pd.DataFrame({"Room Type": ["standard"], "Price": [80000]})
        result = validate_room_type_sheet(df)
        assert result.is_valid
        assert result.warnings


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
