from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AuditEntry:
    timestamp: datetime
    action: str              # "set_room_type", "add_room", "remove_floor", "undo", "load_default", "upload", "save"
    floor_num: Optional[int]
    room_number: Optional[str]
    field_changed: str
    old_value: str
    new_value: str
    rationale: str = ""
