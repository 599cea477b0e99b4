import uuid
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


def new_container_id(floor_num: int, room_info: str, room_number: str, token: Optional[str] = None) -> str:
    """Compose a container id from its floor, room type and number plus a uniqueness token."""
    token = token or uuid.uuid4().hex
    return f"{floor_num}-{room_info}-{room_number}-{token}"


def room_number_sort_key(room_number: Optional[str]) -> Tuple[int, int, str]:
    """Numeric numbers ascending first; empty or non-numeric ones after, by string."""
    text = (room_number or "").strip()
    if text.isdigit():
        return (0, int(text), text)
    return (1, 0, text)


def sort_room_numbers(numbers) -> List[str]:
    """Deduplicate and order room numbers numerically. Blank entries are dropped."""
    unique = {str(n).strip() for n in numbers if n is not None and str(n).strip()}
    return sorted(unique, key=room_number_sort_key)


@dataclass
class Container:
    container_id: str
    room_info: str = ""
    room_number: str = ""
    price: float = 0
    is_active: bool = True

    @property
    def is_numbered(self) -> bool:
        return bool(self.room_info) and bool(self.room_number)

    @property
    def state(self) -> str:
        if not self.room_info:
            return "unassigned"
        if not self.room_number:
            return "assigned"
        return "numbered"


@dataclass
class Floor:
    floor_num: int
    containers: List[Container] = field(default_factory=list)

    def find_container(self, container_id: str) -> Optional[Container]:
        return next((c for c in self.containers if c.container_id == container_id), None)

    def sort_containers(self):
        self.containers.sort(key=lambda c: room_number_sort_key(c.room_number))
