"""Floor and room mutations: add/remove rooms and floors, undo, layout generation."""

import copy
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from models.room_type import RoomType, normalize_room_info
from models.floor import Floor, Container, new_container_id, room_number_sort_key, sort_room_numbers
from engine.numbering import (
    allocate_for_floor, floor_of_room_number, format_room_number,
    next_room_number, used_room_numbers,
)
from engine.synchronizer import (
    add_room_number, all_containers, build_room_type_index, detach_room_number,
    find_floor, resync_room_types,
)
from data.loader import parse_room_types
from config.defaults import NOTHING_TO_UNDO_MESSAGE, STALE_UNDO_MESSAGE, MIN_ROOM_SUFFIX

logger = logging.getLogger(__name__)


@dataclass
class FloorUndoBuffer:
    """Single-slot undo: the floor list as it was before the last removal.

    ``after`` is the floor list the removal produced; undo only applies while
    the current floors still match it.
    """
    snapshot: Optional[List[Floor]] = None
    after: Optional[List[Floor]] = None

    @property
    def is_empty(self) -> bool:
        return not self.snapshot


@dataclass
class FloorRemoval:
    floors: List[Floor]
    room_types: List[RoomType]
    undo_buffer: FloorUndoBuffer


@dataclass
class UndoResult:
    floors: List[Floor]
    undo_buffer: FloorUndoBuffer
    restored: bool
    message: str = ""


def add_floor(floors: List[Floor], floor_num: int) -> List[Floor]:
    """Add an empty floor; floors stay ordered by number."""
    if find_floor(floors, floor_num) is not None:
        logger.debug("add_floor: floor %s already exists", floor_num)
        return floors
    new_floors = copy.deepcopy(floors) + [Floor(floor_num=floor_num)]
    new_floors.sort(key=lambda f: f.floor_num)
    logger.info("Added floor %s", floor_num)
    return new_floors


def add_room_to_floor(
    floors: List[Floor],
    room_types: List[RoomType],
    floor_num: int,
) -> Tuple[List[Floor], List[RoomType]]:
    """Append a room with a fresh number, assigned to the first known room type."""
    if find_floor(floors, floor_num) is None:
        logger.debug("add_room_to_floor: floor %s not found", floor_num)
        return floors, room_types
    if not room_types:
        logger.warning("add_room_to_floor: no room types defined")
        return floors, room_types

    new_floors = copy.deepcopy(floors)
    new_types = copy.deepcopy(room_types)
    floor = find_floor(new_floors, floor_num)
    default_type = new_types[0]

    room_number = allocate_for_floor(new_floors, floor_num)
    if any(c.room_number == room_number for c in floor.containers):
        logger.warning("add_room_to_floor: room %s already exists on floor %s", room_number, floor_num)
        return floors, room_types

    floor.containers.append(Container(
        container_id=new_container_id(floor_num, default_type.room_info, room_number),
        room_info=default_type.room_info,
        room_number=room_number,
        price=default_type.price,
        is_active=True,
    ))
    floor.sort_containers()
    detach_room_number(new_types, room_number, keep=default_type)
    add_room_number(default_type, room_number)

    logger.info("Added room %s (%s) to floor %s", room_number, default_type.room_info, floor_num)
    return new_floors, new_types


def remove_container(
    floors: List[Floor],
    room_types: List[RoomType],
    floor_num: int,
    container_id: str,
) -> Tuple[List[Floor], List[RoomType]]:
    floor = find_floor(floors, floor_num)
    if floor is None or floor.find_container(container_id) is None:
        logger.debug("remove_container: container %s not found on floor %s", container_id, floor_num)
        return floors, room_types

    new_floors = copy.deepcopy(floors)
    new_types = copy.deepcopy(room_types)
    floor = find_floor(new_floors, floor_num)
    removed = floor.find_container(container_id)
    floor.containers.remove(removed)
    floor.sort_containers()

    if removed.room_number:
        detach_room_number(new_types, removed.room_number)

    logger.info("Removed room %s from floor %s", removed.room_number or "(unnumbered)", floor_num)
    return new_floors, new_types


def remove_floor(
    floors: List[Floor],
    room_types: List[RoomType],
    floor_num: int,
    undo_buffer: Optional[FloorUndoBuffer] = None,
) -> FloorRemoval:
    """Remove a floor and strip its room numbers from every room type.

    The returned undo buffer holds the floor list from before the removal and
    replaces whatever the previous buffer held.
    """
    if find_floor(floors, floor_num) is None:
        logger.debug("remove_floor: floor %s not found", floor_num)
        return FloorRemoval(floors, room_types, undo_buffer or FloorUndoBuffer())

    snapshot = copy.deepcopy(floors)
    new_floors = [copy.deepcopy(f) for f in floors if f.floor_num != floor_num]
    new_types = copy.deepcopy(room_types)
    for rt in new_types:
        kept = [n for n in rt.room_numbers if floor_of_room_number(n) != floor_num]
        if len(kept) != len(rt.room_numbers):
            rt.room_numbers = kept
            rt.room_numbers_backup = None

    logger.info("Removed floor %s", floor_num)
    return FloorRemoval(
        new_floors, new_types,
        FloorUndoBuffer(snapshot=snapshot, after=copy.deepcopy(new_floors)),
    )


def undo_remove_floor(undo_buffer: FloorUndoBuffer, floors: List[Floor]) -> UndoResult:
    """Restore the floor list saved by the last remove_floor.

    Room types are not touched; run rebuild_room_types_from_containers over the
    restored floors to put the removed numbers back.

    If the floors were edited after the removal, restoring the snapshot would
    drop those edits, so the buffer is discarded and nothing is restored.
    """
    if undo_buffer is None or undo_buffer.is_empty:
        logger.info("Undo requested with an empty buffer")
        return UndoResult(floors, FloorUndoBuffer(), restored=False, message=NOTHING_TO_UNDO_MESSAGE)

    if undo_buffer.after is not None and floors != undo_buffer.after:
        logger.warning("Undo discarded: floors changed since the removal")
        return UndoResult(floors, FloorUndoBuffer(), restored=False, message=STALE_UNDO_MESSAGE)

    restored = copy.deepcopy(undo_buffer.snapshot)
    logger.info("Restored %d floors from undo buffer", len(restored))
    return UndoResult(restored, FloorUndoBuffer(), restored=True, message="Floor removal undone.")


def generate_initial_layout(
    floor_numbers: List[int],
    room_types: List[RoomType],
) -> Tuple[List[Floor], List[RoomType]]:
    """Create one container per room-type number on each listed floor.

    Room types come back holding exactly the generated numbers.
    """
    floors = []
    for floor_num in sorted(set(floor_numbers)):
        containers = []
        seen = set()
        for rt in room_types:
            for number in sort_room_numbers(rt.room_numbers):
                if floor_of_room_number(number) != floor_num or number in seen:
                    continue
                seen.add(number)
                containers.append(Container(
                    container_id=new_container_id(floor_num, rt.room_info, number),
                    room_info=rt.room_info,
                    room_number=number,
                    price=rt.price,
                    is_active=True,
                ))
        containers.sort(key=lambda c: room_number_sort_key(c.room_number))
        floors.append(Floor(floor_num=floor_num, containers=containers))

    new_types = resync_room_types(room_types, all_containers(floors))

    logger.info("Generated layout: %d floors, %d rooms", len(floors), len(all_containers(floors)))
    return floors, new_types


def build_default_layout(
    template: List[dict],
    floor_numbers: List[int],
) -> Tuple[List[Floor], List[RoomType]]:
    """Build room types and floors from a room-type template.

    Each template entry uses the saved-configuration keys (roomInfo, price,
    floorSettings, startRoomNumbers, ...). For every floor, each type with a
    positive floorSettings count gets that many rooms, starting at its
    startRoomNumbers entry and skipping numbers already taken.
    """
    room_types = parse_room_types(template)
    for rt in room_types:
        rt.room_numbers = []
        rt.room_numbers_backup = []

    floors = [Floor(floor_num=n) for n in sorted(set(floor_numbers))]
    for floor in floors:
        for rt in room_types:
            count = rt.floor_settings.get(floor.floor_num, 0)
            if count <= 0:
                continue
            start = rt.start_room_numbers.get(floor.floor_num) or format_room_number(floor.floor_num, MIN_ROOM_SUFFIX)
            floor_max = int(start) - 1 if floor_of_room_number(start) == floor.floor_num else None
            for _ in range(count):
                number = next_room_number(floor.floor_num, used_room_numbers(floors), floor_max)
                floor.containers.append(Container(
                    container_id=new_container_id(floor.floor_num, rt.room_info, number),
                    room_info=rt.room_info,
                    room_number=number,
                    price=rt.price,
                ))
                add_room_number(rt, number)
                floor_max = int(number)
        floor.sort_containers()

    logger.info("Loaded default layout: %d room types over floors %s", len(room_types), floor_numbers)
    return floors, room_types


def add_room_type(
    room_types: List[RoomType],
    room_info: str,
    price: float = 0,
    name_kor: str = "",
    name_eng: str = "",
    aliases: Optional[List[str]] = None,
) -> List[RoomType]:
    """Append a new, empty room type. Blank or duplicate names are ignored."""
    key = normalize_room_info(room_info)
    if not key or key in build_room_type_index(room_types):
        logger.warning("add_room_type: '%s' is blank or already defined", room_info)
        return room_types
    new_types = copy.deepcopy(room_types)
    new_types.append(RoomType(
        room_info=room_info.strip(),
        price=price,
        name_kor=name_kor,
        name_eng=name_eng,
        aliases=[a for a in (aliases or []) if a],
    ))
    logger.info("Added room type '%s'", room_info.strip())
    return new_types


def remove_room_type(
    floors: List[Floor],
    room_types: List[RoomType],
    room_info: str,
) -> Tuple[List[Floor], List[RoomType]]:
    """Drop a room type; its containers become unassigned but keep their numbers."""
    key = normalize_room_info(room_info)
    if key not in build_room_type_index(room_types):
        logger.debug("remove_room_type: '%s' not found", room_info)
        return floors, room_types

    new_types = [copy.deepcopy(rt) for rt in room_types if rt.key != key]
    new_floors = copy.deepcopy(floors)
    for floor in new_floors:
        for c in floor.containers:
            if normalize_room_info(c.room_info) == key:
                c.room_info = ""
                c.price = 0
                c.container_id = new_container_id(floor.floor_num, "", c.room_number)

    logger.info("Removed room type '%s'", room_info)
    return new_floors, new_types
