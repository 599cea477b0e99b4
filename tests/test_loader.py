"""Tests for hotel settings parsing and payload building."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.room_type import RoomType
from models.floor import Floor, Container
from engine.errors import SettingsFormatError
from data.loader import (
    build_settings_payload,
    dump_settings_json,
    load_settings_json,
    parse_room_type_sheet,
    parse_settings,
)
from data.sample_data import generate_room_types_df


def make_payload():
    return {
        "hotelId": "H1",
        "roomTypes": [
            {
                "roomInfo": " Standard ",
                "price": "80000",
                "roomNumbers": ["302", "301", "301"],
                "aliases": ["std", "", None],
                "floorSettings": {"3": 2},
                "startRoomNumbers": {"3": "301"},
            },
            {"roomInfo": "deluxe", "price": 120000, "roomNumbers": []},
        ],
        "gridSettings": {
            "floors": [
                {"floorNum": 4, "containers": []},
                {"floorNum": 3, "containers": [
                    {"containerId": "c2", "roomInfo": "standard", "roomNumber": "302", "price": 80000},
                    {"roomInfo": "standard", "roomNumber": "301", "price": 80000, "isActive": True},
                ]},
            ],
        },
    }


class TestParseSettings:
    def test_room_types_are_normalized(self):
        room_types, _ = parse_settings(make_payload())
        standard = room_types[0]
        assert standard.room_info == "Standard"
        assert standard.key == "standard"
        assert standard.price == 80000
        assert standard.room_numbers == ["301", "302"]
        assert standard.stock == 2
        assert standard.aliases == ["std"]
        assert standard.floor_settings == {3: 2}
        assert standard.start_room_numbers == {3: "301"}
        assert standard.room_numbers_backup is None

    def test_floors_sorted_with_temp_ids(self):
        _, floors = parse_settings(make_payload())
        assert [f.floor_num for f in floors] == [3, 4]
        assert [c.room_number for c in floors[0].containers] == ["301", "302"]
        assert floors[0].containers[0].container_id == "temp-301"
        assert floors[0].containers[0].is_active is True

    def test_wrong_shapes_raise(self):
        with pytest.raises(SettingsFormatError):
            parse_settings([])
        with pytest.raises(SettingsFormatError):
            parse_settings({"roomTypes": "standard"})
        with pytest.raises(SettingsFormatError):
            parse_settings({"gridSettings": {"floors": "3"}})

    def test_bad_field_values_raise_format_error(self):
        bad_payloads = [
            {"gridSettings": {"floors": ["oops"]}},
            {"gridSettings": {"floors": [{"floorNum": "3F", "containers": []}]}},
            {"gridSettings": {"floors": [{"floorNum": 3, "containers": ["301"]}]}},
            {"roomTypes": [{"roomInfo": "standard", "floorSettings": {"3": "six"}}]},
            {"roomTypes": [{"roomInfo": "standard", "floorSettings": ["3"]}]},
        ]
        for payload in bad_payloads:
            with pytest.raises(SettingsFormatError):
                parse_settings(payload)

    def test_format_error_names_the_record(self):
        with pytest.raises(SettingsFormatError) as exc_info:
            parse_settings({"gridSettings": {"floors": [{"floorNum": 3}, {"floorNum": "3F"}]}})
        assert exc_info.value.details["index"] == 1
        assert exc_info.value.details["floorNum"] == "3F"


class TestBuildPayload:
    def test_payload_shape(self):
        room_types = [RoomType("standard", 80000, {3: 2}, {3: "301"}, ["301", "302"])]
        floors = [Floor(3, [Container("c1", "standard", "301", 80000), Container("", "standard", "302", 80000)])]
        payload = build_settings_payload("H1", room_types, floors, hotel_name="Seaside")

        assert payload["hotelId"] == "H1"
        assert payload["totalRooms"] == 2
        assert payload["roomTypes"][0]["stock"] == 2
        assert payload["roomTypes"][0]["floorSettings"] == {"3": 2}
        assert payload["roomTypes"][0]["roomNumbersBackup"] == ["301", "302"]
        containers = payload["gridSettings"]["floors"][0]["containers"]
        assert containers[1]["containerId"] == "temp-302"
        assert payload["hotelName"] == "Seaside"

    def test_hotel_id_required(self):
        with pytest.raises(SettingsFormatError):
            build_settings_payload("", [], [])

    def test_json_round_trip_keeps_inventory(self):
        room_types, floors = parse_settings(make_payload())
        text = dump_settings_json(build_settings_payload("H1", room_types, floors))
        room_types2, floors2 = load_settings_json(text)
        assert [rt.room_numbers for rt in room_types2] == [rt.room_numbers for rt in room_types]
        assert floors2 == floors

    def test_invalid_json_raises(self):
        with pytest.raises(SettingsFormatError):
            load_settings_json("{not json")

    def test_accepts_utf8_bytes(self):
        room_types, _ = load_settings_json(dump_settings_json(make_payload()).encode("utf-8"))
        assert room_types[0].key == "standard"

    def test_invalid_utf8_raises(self):
        with pytest.raises(SettingsFormatError):
            load_settings_json(b"\xff\xfe{")


class TestRoomTypeSheet:
    def test_parse_sample_sheet(self):
        room_types = parse_room_type_sheet(generate_room_types_df())
        assert len(room_types) == 7
        standard = room_types[0]
        assert standard.room_info == "standard"
        assert standard.room_numbers[:2] == ["201", "202"]
        assert standard.stock == 12
        assert standard.name_eng == "Standard"
        assert standard.aliases == ["standard"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
