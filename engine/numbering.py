"""Room number allocation: the next free, floor-prefixed number for a floor."""

import logging
from typing import Iterable, List, Optional, Set, Union

from models.floor import Floor
from engine.errors import NumberingExhaustedError
from config.defaults import (
    ROOMS_PER_FLOOR_BASE, ROOM_SUFFIX_DIGITS,
    MIN_ROOM_SUFFIX, MAX_ROOM_SUFFIX,
)

logger = logging.getLogger(__name__)


def format_room_number(floor_num: int, suffix: int) -> str:
    """Floor digits followed by the zero-padded suffix, e.g. (3, 1) -> "301"."""
    return f"{floor_num}{suffix:0{ROOM_SUFFIX_DIGITS}d}"


def floor_of_room_number(room_number: Optional[str]) -> Optional[int]:
    """Numeric floor prefix of a room number ("1204" -> 12), None if not numeric."""
    text = (room_number or "").strip()
    if not text.isdigit():
        return None
    return int(text) // ROOMS_PER_FLOOR_BASE


def used_room_numbers(floors: List[Floor]) -> Set[str]:
    """Every room number held by a container on any floor."""
    return {c.room_number for f in floors for c in f.containers if c.room_number}


def floor_max_number(floors: List[Floor], floor_num: int) -> Optional[int]:
    """Highest numbered, active room number belonging to the floor, or None."""
    numbers = [
        int(c.room_number)
        for f in floors
        for c in f.containers
        if c.is_numbered and c.is_active and floor_of_room_number(c.room_number) == floor_num
    ]
    return max(numbers) if numbers else None


def next_room_number(
    floor_num: int,
    used_numbers: Iterable[str],
    floor_max: Optional[Union[int, str]] = None,
) -> str:
    """Return the next unused room number for a floor.

    Probing starts after the floor's highest active number (or at suffix 01
    for an empty floor) and moves upward past every number in the global used
    set. When the upward probe runs past the last suffix, the floor's range is
    rescanned from 01 for the lowest free gap. Raises NumberingExhaustedError
    when every suffix on the floor is taken.
    """
    used = set(used_numbers)
    base = floor_num * ROOMS_PER_FLOOR_BASE

    start_suffix = MIN_ROOM_SUFFIX
    if floor_max is not None:
        start_suffix = max(MIN_ROOM_SUFFIX, int(floor_max) - base + 1)

    for suffix in range(start_suffix, MAX_ROOM_SUFFIX + 1):
        candidate = format_room_number(floor_num, suffix)
        if candidate not in used:
            return candidate

    # Upward probe overflowed the suffix range: fill the lowest gap instead
    for suffix in range(MIN_ROOM_SUFFIX, min(start_suffix, MAX_ROOM_SUFFIX + 1)):
        candidate = format_room_number(floor_num, suffix)
        if candidate not in used:
            logger.debug("Floor %s suffix range overflowed; reusing gap %s", floor_num, candidate)
            return candidate

    logger.warning("Room numbering exhausted on floor %s", floor_num)
    raise NumberingExhaustedError(floor_num, MAX_ROOM_SUFFIX)


def allocate_for_floor(floors: List[Floor], floor_num: int) -> str:
    """Allocate against the current layout: global used set plus the floor's highest number."""
    return next_room_number(
        floor_num,
        used_room_numbers(floors),
        floor_max_number(floors, floor_num),
    )
