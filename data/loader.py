"""Hotel settings parsing: saved configuration payloads and CSV/XLSX room-type sheets."""

import json
import pandas as pd
from typing import List, Optional

from models.room_type import RoomType, normalize_room_info
from models.floor import Floor, Container, sort_room_numbers
from engine.errors import SettingsFormatError
from config.defaults import DEFAULT_CHECK_IN_TIME, DEFAULT_CHECK_OUT_TIME


def _to_float(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _int_keys(mapping: Optional[dict]) -> dict:
    """Saved configurations key floors by string ("3"); the models use int."""
    result = {}
    for k, v in (mapping or {}).items():
        try:
            result[int(k)] = v
        except (TypeError, ValueError):
            continue
    return result


def parse_room_types(records: List[dict]) -> List[RoomType]:
    """Convert saved roomTypes entries into RoomType objects."""
    if not isinstance(records, list):
        raise SettingsFormatError("roomTypes must be a list.", details={"type": type(records).__name__})
    room_types = []
    for index, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise SettingsFormatError("Each room type must be an object.", details={"index": index})
        try:
            room_types.append(_room_type_from_record(rec))
        except (TypeError, ValueError, AttributeError) as e:
            raise SettingsFormatError(
                f"Room type {index} has an invalid value: {e}",
                details={"index": index, "roomInfo": rec.get("roomInfo")},
            ) from e
    return room_types


def _room_type_from_record(rec: dict) -> RoomType:
    backup = rec.get("roomNumbersBackup")
    return RoomType(
        room_info=str(rec.get("roomInfo") or "").strip(),
        price=_to_float(rec.get("price")),
        floor_settings={k: int(v) for k, v in _int_keys(rec.get("floorSettings")).items()},
        start_room_numbers={k: str(v) for k, v in _int_keys(rec.get("startRoomNumbers")).items()},
        room_numbers=sort_room_numbers(rec.get("roomNumbers") or []),
        aliases=list(dict.fromkeys(a for a in (rec.get("aliases") or []) if a)),
        name_kor=rec.get("nameKor") or "",
        name_eng=rec.get("nameEng") or "",
        room_numbers_backup=sort_room_numbers(backup) if isinstance(backup, list) else None,
    )


def parse_floors(grid_settings: dict) -> List[Floor]:
    """Convert gridSettings ({"floors": [...]}) into Floor objects."""
    if not isinstance(grid_settings, dict) or not isinstance(grid_settings.get("floors", []), list):
        raise SettingsFormatError("gridSettings.floors must be a list.")
    floors = []
    for index, rec in enumerate(grid_settings.get("floors", [])):
        if not isinstance(rec, dict):
            raise SettingsFormatError("Each floor must be an object.", details={"index": index})
        try:
            floors.append(_floor_from_record(rec))
        except (TypeError, ValueError, AttributeError) as e:
            raise SettingsFormatError(
                f"Floor {index} has an invalid value: {e}",
                details={"index": index, "floorNum": rec.get("floorNum")},
            ) from e
    floors.sort(key=lambda f: f.floor_num)
    return floors


def _floor_from_record(rec: dict) -> Floor:
    floor = Floor(floor_num=int(rec.get("floorNum") or 0))
    for c in rec.get("containers") or []:
        if not isinstance(c, dict):
            raise TypeError("container entries must be objects")
        room_number = str(c.get("roomNumber") or "").strip()
        floor.containers.append(Container(
            container_id=c.get("containerId") or f"temp-{room_number}",
            room_info=str(c.get("roomInfo") or "").strip(),
            room_number=room_number,
            price=_to_float(c.get("price")),
            is_active=c.get("isActive", True) is not False,
        ))
    floor.sort_containers()
    return floor


def parse_settings(payload: dict):
    """Return (room_types, floors) from a saved hotel settings payload."""
    if not isinstance(payload, dict):
        raise SettingsFormatError("Hotel settings must be an object.")
    room_types = parse_room_types(payload.get("roomTypes") or [])
    floors = parse_floors(payload.get("gridSettings") or {"floors": []})
    return room_types, floors


def build_settings_payload(
    hotel_id: str,
    room_types: List[RoomType],
    floors: List[Floor],
    hotel_name: str = "",
    hotel_address: str = "",
    email: str = "",
    phone_number: str = "",
    check_in_time: str = DEFAULT_CHECK_IN_TIME,
    check_out_time: str = DEFAULT_CHECK_OUT_TIME,
) -> dict:
    """Build the full hotel settings payload the configuration store saves."""
    if not hotel_id:
        raise SettingsFormatError("hotelId is required")

    return {
        "hotelId": hotel_id,
        "roomTypes": [{
            "roomInfo": rt.room_info,
            "nameKor": rt.name_kor,
            "nameEng": rt.name_eng,
            "price": rt.price,
            "stock": rt.stock,
            "aliases": [a for a in rt.aliases if a],
            "roomNumbers": list(rt.room_numbers),
            "roomNumbersBackup": list(rt.room_numbers_backup if rt.room_numbers_backup is not None else rt.room_numbers),
            "floorSettings": {str(k): v for k, v in rt.floor_settings.items()},
            "startRoomNumbers": {str(k): v for k, v in rt.start_room_numbers.items()},
        } for rt in room_types],
        "gridSettings": {
            "floors": [{
                "floorNum": f.floor_num,
                "containers": [{
                    "containerId": c.container_id or f"temp-{c.room_number}",
                    "roomInfo": c.room_info,
                    "roomNumber": c.room_number,
                    "price": c.price,
                    "isActive": c.is_active,
                } for c in f.containers],
            } for f in floors],
        },
        "checkInTime": check_in_time,
        "checkOutTime": check_out_time,
        "hotelName": hotel_name,
        "address": hotel_address,
        "email": email,
        "phoneNumber": phone_number,
        "totalRooms": sum(rt.stock for rt in room_types),
    }


def load_settings_json(text):
    """Parse a JSON settings document (str or UTF-8 bytes) into (room_types, floors)."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SettingsFormatError(f"Settings file is not valid UTF-8: {e}") from e
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise SettingsFormatError(f"Settings file is not valid JSON: {e}") from e
    return parse_settings(payload)


def dump_settings_json(payload: dict) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def parse_room_type_sheet(df: pd.DataFrame) -> List[RoomType]:
    """Convert a room-type master DataFrame into RoomType objects."""
    room_types = []
    for _, row in df.iterrows():
        aliases = []
        if "Aliases" in df.columns and pd.notna(row.get("Aliases")):
            aliases = [a.strip() for a in str(row["Aliases"]).split(",") if a.strip()]
        numbers = []
        if "Room Numbers" in df.columns and pd.notna(row.get("Room Numbers")):
            numbers = [n.strip() for n in str(row["Room Numbers"]).split(",")]
        name = str(row["Room Type"]).strip()
        room_types.append(RoomType(
            room_info=normalize_room_info(name),
            price=float(row["Price"]),
            room_numbers=sort_room_numbers(numbers),
            aliases=aliases,
            name_kor=str(row["Name (KOR)"]).strip() if "Name (KOR)" in df.columns and pd.notna(row.get("Name (KOR)")) else "",
            name_eng=str(row["Name (ENG)"]).strip() if "Name (ENG)" in df.columns and pd.notna(row.get("Name (ENG)")) else name,
        ))
    return room_types


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, dtype={"Room Numbers": str})
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype={"Room Numbers": str})
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def load_csv_path(path: str) -> pd.DataFrame:
    """Load a CSV file from a local path."""
    return pd.read_csv(path, dtype={"Room Numbers": str})
