"""Save validation, inventory invariant checks and upload schema validation."""

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, List
import pandas as pd

from models.room_type import RoomType, normalize_room_info
from models.floor import Floor, room_number_sort_key


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        self.is_valid = False
        self.errors.append(message)


ROOM_TYPE_REQUIRED_COLUMNS = [
    "Room Type",
    "Price",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.add_error(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.add_error(f"{file_label}: File contains no data rows.")
    return result


def validate_room_type_sheet(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, ROOM_TYPE_REQUIRED_COLUMNS, "Room Types")
    if not result.is_valid:
        return result

    names = df["Room Type"].fillna("").astype(str).str.strip()
    if (names == "").any():
        result.add_error("Room Types: Room Type cannot be blank.")

    prices = pd.to_numeric(df["Price"], errors="coerce")
    if prices.isna().any():
        result.add_error("Room Types: Price must be numeric.")
    elif (prices < 0).any():
        result.add_error("Room Types: Price cannot be negative.")

    keys = names.str.lower()
    dupes = keys[keys.duplicated(keep=False) & (keys != "")]
    if not dupes.empty:
        result.add_error(f"Room Types: Duplicate room types: {sorted(dupes.unique().tolist())}")

    if "Room Numbers" in df.columns:
        seen: Dict[str, str] = {}
        for name, raw in zip(names, df["Room Numbers"].fillna("").astype(str)):
            for number in (n.strip() for n in raw.split(",")):
                if not number:
                    continue
                if not number.isdigit():
                    result.add_error(f"Room Types: Room number '{number}' of '{name}' is not numeric.")
                elif number in seen and seen[number] != name:
                    result.add_error(
                        f"Room Types: Room number {number} is listed under both '{seen[number]}' and '{name}'."
                    )
                seen.setdefault(number, name)
    else:
        result.warnings.append("Room Types: No 'Room Numbers' column; types will start with no rooms.")

    return result


def validate_for_save(room_types: List[RoomType]) -> ValidationResult:
    """Refuse a save the caller should not send; never raises."""
    result = ValidationResult()
    if not room_types:
        result.add_error("At least one room type is required.")
        return result

    keys = Counter(rt.key for rt in room_types)
    if keys.get("", 0):
        result.add_error("Every room type needs a name.")
    duplicates = sorted(k for k, n in keys.items() if k and n > 1)
    if duplicates:
        result.add_error(f"Duplicate room types: {', '.join(duplicates)}")

    empty = [rt.room_info or "(unnamed)" for rt in room_types if not rt.room_numbers]
    if empty:
        result.add_error(
            f"Room numbers must be generated for every room type before saving. Missing: {', '.join(empty)}"
        )

    for rt in room_types:
        if rt.price <= 0:
            result.warnings.append(f"Room type '{rt.room_info}' has no price set.")
    return result


def check_inventory_invariants(room_types: List[RoomType], floors: List[Floor]) -> ValidationResult:
    """Report every place where floors and room types disagree."""
    result = ValidationResult()

    for rt in room_types:
        if len(set(rt.room_numbers)) != len(rt.room_numbers):
            result.add_error(f"Room type '{rt.room_info}' lists duplicate room numbers.")
        if rt.room_numbers != sorted(rt.room_numbers, key=room_number_sort_key):
            result.add_error(f"Room type '{rt.room_info}' room numbers are not in numeric order.")

    owners: Dict[str, List[str]] = defaultdict(list)
    for rt in room_types:
        for number in set(rt.room_numbers):
            owners[number].append(rt.key)
    for number, keys in sorted(owners.items(), key=lambda kv: room_number_sort_key(kv[0])):
        if len(keys) > 1:
            result.add_error(f"Room {number} is listed under several room types: {', '.join(sorted(keys))}")

    holders: Dict[str, List[int]] = defaultdict(list)
    active: Dict[str, str] = {}
    for floor in floors:
        numbers = [c.room_number for c in floor.containers]
        if numbers != sorted(numbers, key=room_number_sort_key):
            result.add_error(f"Floor {floor.floor_num} rooms are not in numeric order.")
        for c in floor.containers:
            if not c.room_number:
                continue
            holders[c.room_number].append(floor.floor_num)
            if c.is_active and c.room_info:
                active[c.room_number] = normalize_room_info(c.room_info)

    for number, floor_nums in sorted(holders.items(), key=lambda kv: room_number_sort_key(kv[0])):
        if len(floor_nums) > 1:
            result.add_error(f"Room {number} appears {len(floor_nums)} times (floors {floor_nums}).")

    for number, key in sorted(active.items(), key=lambda kv: room_number_sort_key(kv[0])):
        if key not in owners.get(number, []):
            result.add_error(f"Room {number} is a '{key}' room on the floor but missing from that room type.")

    for number, keys in sorted(owners.items(), key=lambda kv: room_number_sort_key(kv[0])):
        if number not in active:
            result.add_error(f"Room {number} of '{keys[0]}' has no active room on any floor.")

    return result
