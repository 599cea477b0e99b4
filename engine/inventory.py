"""Derived inventory views: totals, per-type and per-floor summaries, floor plans."""

import copy
from collections import defaultdict
from typing import Dict, List

from models.room_type import RoomType, normalize_room_info
from models.floor import Floor
from engine.numbering import floor_of_room_number


def total_rooms(room_types: List[RoomType]) -> int:
    return sum(rt.stock for rt in room_types)


def derive_floor_plan(room_types: List[RoomType]) -> List[RoomType]:
    """Recompute floor_settings and start_room_numbers from each type's room numbers."""
    derived = copy.deepcopy(room_types)
    for rt in derived:
        by_floor: Dict[int, List[str]] = defaultdict(list)
        for number in rt.room_numbers:
            floor_num = floor_of_room_number(number)
            if floor_num is not None:
                by_floor[floor_num].append(number)
        rt.floor_settings = {f: len(nums) for f, nums in sorted(by_floor.items())}
        rt.start_room_numbers = {
            f: min(nums, key=int) for f, nums in sorted(by_floor.items())
        }
    return derived


def get_room_type_summary(room_types: List[RoomType]) -> List[dict]:
    """Rows for the room-type summary panel."""
    total = total_rooms(room_types)
    results = []
    for rt in room_types:
        results.append({
            "room_info": rt.room_info,
            "name_eng": rt.name_eng,
            "name_kor": rt.name_kor,
            "price": rt.price,
            "stock": rt.stock,
            "share_pct": rt.stock / total if total > 0 else 0,
            "room_numbers": list(rt.room_numbers),
            "floors": sorted({f for f in map(floor_of_room_number, rt.room_numbers) if f is not None}),
        })
    return results


def get_floor_summary(floors: List[Floor]) -> List[dict]:
    """Per-floor room counts for the layout grid header."""
    results = []
    for f in floors:
        type_counts: Dict[str, int] = defaultdict(int)
        for c in f.containers:
            if c.is_active and c.room_info:
                type_counts[normalize_room_info(c.room_info)] += 1
        results.append({
            "floor_num": f.floor_num,
            "room_count": len(f.containers),
            "active_count": sum(1 for c in f.containers if c.is_active),
            "inactive_count": sum(1 for c in f.containers if not c.is_active),
            "unassigned_count": sum(1 for c in f.containers if not c.room_info),
            "room_types": dict(type_counts),
            "first_room": f.containers[0].room_number if f.containers else "",
            "last_room": f.containers[-1].room_number if f.containers else "",
        })
    return results
