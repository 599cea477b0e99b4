"""Keeps floor containers and room-type room-number lists mutually consistent."""

import copy
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from models.room_type import RoomType, normalize_room_info
from models.floor import Floor, Container, new_container_id, sort_room_numbers
from engine.numbering import allocate_for_floor, floor_of_room_number, used_room_numbers

logger = logging.getLogger(__name__)


def build_room_type_index(room_types: List[RoomType]) -> Dict[str, RoomType]:
    """Map normalized room_info -> RoomType. The first type wins on a duplicate key."""
    index: Dict[str, RoomType] = {}
    for rt in room_types:
        if rt.key and rt.key not in index:
            index[rt.key] = rt
    return index


def find_room_type(room_types: List[RoomType], room_info: Optional[str]) -> Optional[RoomType]:
    return build_room_type_index(room_types).get(normalize_room_info(room_info))


def find_floor(floors: List[Floor], floor_num: int) -> Optional[Floor]:
    return next((f for f in floors if f.floor_num == floor_num), None)


def all_containers(floors: List[Floor]) -> List[Container]:
    return [c for f in floors for c in f.containers]


def locate_container(
    floors: List[Floor], floor_num: int, container_id: str,
) -> Tuple[Optional[Floor], Optional[Container]]:
    floor = find_floor(floors, floor_num)
    if floor is None:
        return None, None
    return floor, floor.find_container(container_id)


def add_room_number(room_type: RoomType, room_number: str):
    """Insert a number into a type's list, kept sorted and unique."""
    room_type.room_numbers = sort_room_numbers(room_type.room_numbers + [room_number])
    room_type.room_numbers_backup = None


def detach_room_number(room_types: List[RoomType], room_number: str, keep: Optional[RoomType] = None):
    """Remove a number from every type except `keep`."""
    for rt in room_types:
        if rt is keep or room_number not in rt.room_numbers:
            continue
        rt.room_numbers = [n for n in rt.room_numbers if n != room_number]
        rt.room_numbers_backup = None


def _clone(floors: List[Floor], room_types: List[RoomType]) -> Tuple[List[Floor], List[RoomType]]:
    return copy.deepcopy(floors), copy.deepcopy(room_types)


def set_container_room_type(
    floors: List[Floor],
    room_types: List[RoomType],
    floor_num: int,
    container_id: str,
    new_room_info: str,
) -> Tuple[List[Floor], List[RoomType]]:
    """Assign a container to a room type and move its room number accordingly.

    A container without a number gets one from the allocator. An unknown target
    type is accepted with a price of 0. Returns the inputs unchanged when the
    floor or container is not found.
    """
    _, target = locate_container(floors, floor_num, container_id)
    if target is None:
        logger.debug("set_container_room_type: container %s not found on floor %s", container_id, floor_num)
        return floors, room_types

    new_floors, new_types = _clone(floors, room_types)
    floor, container = locate_container(new_floors, floor_num, container_id)
    index = build_room_type_index(new_types)

    new_type = index.get(normalize_room_info(new_room_info))
    room_info = new_type.room_info if new_type else (new_room_info or "").strip()
    old_room_info = container.room_info

    if room_info and not container.room_number:
        container.room_number = allocate_for_floor(new_floors, floor_num)

    if container.room_number:
        detach_room_number(new_types, container.room_number, keep=new_type)
        if new_type and container.is_active:
            add_room_number(new_type, container.room_number)

    container.room_info = room_info
    container.price = new_type.price if new_type else 0
    container.container_id = new_container_id(floor_num, room_info, container.room_number)
    floor.sort_containers()

    if room_info and new_type is None:
        logger.warning("Room %s set to unknown room type '%s'; price defaulted to 0",
                       container.room_number, room_info)
    logger.info("Room %s on floor %s: room type '%s' -> '%s'",
                container.room_number, floor_num, old_room_info, room_info)
    return new_floors, new_types


def set_container_room_number(
    floors: List[Floor],
    room_types: List[RoomType],
    floor_num: int,
    container_id: str,
    new_number: str,
) -> Tuple[List[Floor], List[RoomType]]:
    """Renumber a container. Refused (inputs returned) for a non-numeric number,
    a number outside the floor's range, or one already held by another container."""
    _, target = locate_container(floors, floor_num, container_id)
    if target is None:
        logger.debug("set_container_room_number: container %s not found on floor %s", container_id, floor_num)
        return floors, room_types

    number = (new_number or "").strip()
    if number == target.room_number:
        return floors, room_types
    if floor_of_room_number(number) != floor_num:
        logger.warning("Room number '%s' refused: not a number on floor %s", number, floor_num)
        return floors, room_types
    if number in used_room_numbers(floors):
        logger.warning("Room number %s refused: already in use", number)
        return floors, room_types

    new_floors, new_types = _clone(floors, room_types)
    floor, container = locate_container(new_floors, floor_num, container_id)
    old_number = container.room_number

    if old_number:
        detach_room_number(new_types, old_number)
    room_type = find_room_type(new_types, container.room_info)
    if room_type and container.is_active:
        add_room_number(room_type, number)

    container.room_number = number
    container.container_id = new_container_id(floor_num, container.room_info, number)
    floor.sort_containers()

    logger.info("Floor %s: room %s renumbered to %s", floor_num, old_number or "(none)", number)
    return new_floors, new_types


def set_container_price(
    floors: List[Floor],
    floor_num: int,
    container_id: str,
    price,
) -> List[Floor]:
    """Override a container's effective price. Room types are not affected."""
    _, target = locate_container(floors, floor_num, container_id)
    if target is None:
        logger.debug("set_container_price: container %s not found on floor %s", container_id, floor_num)
        return floors
    try:
        value = float(price)
    except (TypeError, ValueError):
        logger.warning("Price '%s' refused for room %s: not a number", price, target.room_number)
        return floors

    new_floors = copy.deepcopy(floors)
    _, container = locate_container(new_floors, floor_num, container_id)
    container.price = value
    return new_floors


def set_container_active(
    floors: List[Floor],
    room_types: List[RoomType],
    floor_num: int,
    container_id: str,
    is_active: bool,
) -> Tuple[List[Floor], List[RoomType]]:
    """Toggle whether a container counts toward its room type's inventory."""
    _, target = locate_container(floors, floor_num, container_id)
    if target is None or target.is_active == bool(is_active):
        return floors, room_types

    new_floors, new_types = _clone(floors, room_types)
    _, container = locate_container(new_floors, floor_num, container_id)
    container.is_active = bool(is_active)

    if container.is_numbered:
        if container.is_active:
            room_type = find_room_type(new_types, container.room_info)
            if room_type:
                detach_room_number(new_types, container.room_number, keep=room_type)
                add_room_number(room_type, container.room_number)
        else:
            detach_room_number(new_types, container.room_number)

    logger.info("Room %s on floor %s %s", container.room_number, floor_num,
                "activated" if container.is_active else "deactivated")
    return new_floors, new_types


def rebuild_room_types_from_containers(
    room_types: List[RoomType],
    containers: List[Container],
) -> List[RoomType]:
    """Recompute every type's room_numbers from its backup list plus the active
    containers pointing at it. Applying it twice gives the same result."""
    from_floors: Dict[str, List[str]] = defaultdict(list)
    for c in containers:
        if c.is_active and c.is_numbered:
            from_floors[normalize_room_info(c.room_info)].append(c.room_number)

    rebuilt = copy.deepcopy(room_types)
    for rt in rebuilt:
        backup = rt.room_numbers_backup if rt.room_numbers_backup is not None else rt.room_numbers
        merged = sort_room_numbers(list(backup) + from_floors.get(rt.key, []))
        rt.room_numbers = merged
        rt.room_numbers_backup = list(merged)
    return rebuilt


def resync_room_types(
    room_types: List[RoomType],
    containers: List[Container],
) -> List[RoomType]:
    """Rebuild with backups cleared: every type ends up holding exactly the
    numbers of the active containers pointing at it."""
    cleared = copy.deepcopy(room_types)
    for rt in cleared:
        rt.room_numbers = []
        rt.room_numbers_backup = []
    return rebuild_room_types_from_containers(cleared, containers)
