from models.room_type import RoomType, normalize_room_info
from models.floor import Floor, Container, new_container_id, room_number_sort_key, sort_room_numbers
from models.audit import AuditEntry
