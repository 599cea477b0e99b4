from dataclasses import dataclass, field
from typing import Dict, List, Optional


def normalize_room_info(room_info: Optional[str]) -> str:
    """Lookup key for a room type name: trimmed and lowercased."""
    return (room_info or "").strip().lower()


@dataclass
class RoomType:
    room_info: str
    price: float = 0
    floor_settings: Dict[int, int] = field(default_factory=dict)
    start_room_numbers: Dict[int, str] = field(default_factory=dict)
    room_numbers: List[str] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)
    name_kor: str = ""
    name_eng: str = ""
    room_numbers_backup: Optional[List[str]] = None  # None = fall back to room_numbers

    @property
    def key(self) -> str:
        return normalize_room_info(self.room_info)

    @property
    def stock(self) -> int:
        return len(self.room_numbers)
