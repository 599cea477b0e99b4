"""Default configuration constants for the Hotel Room Inventory Planner."""

# Floors created by "Load default layout"
DEFAULT_FLOORS = [2, 3, 4, 5, 6, 7, 8]

# Room numbering: floor digits followed by a zero-padded suffix ("301")
ROOMS_PER_FLOOR_BASE = 100
ROOM_SUFFIX_DIGITS = 2
MIN_ROOM_SUFFIX = 1
MAX_ROOM_SUFFIX = 99  # Highest suffix before a floor is considered full

# Default room-type template. Passed explicitly to build_default_layout;
# floorSettings/startRoomNumbers use the saved-configuration key names.
DEFAULT_ROOM_TYPES = [
    {
        "roomInfo": "standard",
        "nameKor": "스탠다드",
        "nameEng": "Standard",
        "price": 80000,
        "aliases": ["standard"],
        "floorSettings": {2: 6, 3: 6},
        "startRoomNumbers": {2: "201", 3: "301"},
    },
    {
        "roomInfo": "premium",
        "nameKor": "프리미엄",
        "nameEng": "Premium",
        "price": 90000,
        "aliases": ["premium"],
        "floorSettings": {4: 6},
        "startRoomNumbers": {4: "401"},
    },
    {
        "roomInfo": "executive",
        "nameKor": "이그제큐티브",
        "nameEng": "Executive",
        "price": 100000,
        "aliases": ["executive"],
        "floorSettings": {5: 5},
        "startRoomNumbers": {5: "501"},
    },
    {
        "roomInfo": "twin",
        "nameKor": "트윈",
        "nameEng": "Twin",
        "price": 110000,
        "aliases": ["twin"],
        "floorSettings": {6: 5},
        "startRoomNumbers": {6: "601"},
    },
    {
        "roomInfo": "pcroom",
        "nameKor": "PC룸",
        "nameEng": "PC Room",
        "price": 110000,
        "aliases": ["pcroom"],
        "floorSettings": {7: 3},
        "startRoomNumbers": {7: "701"},
    },
    {
        "roomInfo": "styleroom",
        "nameKor": "스타일러룸",
        "nameEng": "Styler Room",
        "price": 90000,
        "aliases": ["styleroom"],
        "floorSettings": {7: 3},
        "startRoomNumbers": {7: "704"},
    },
    {
        "roomInfo": "hinokki",
        "nameKor": "히노끼",
        "nameEng": "Hinokki",
        "price": 150000,
        "aliases": ["hinokki"],
        "floorSettings": {8: 4},
        "startRoomNumbers": {8: "801"},
    },
]

# Hotel settings payload defaults
DEFAULT_CHECK_IN_TIME = "16:00"
DEFAULT_CHECK_OUT_TIME = "11:00"

# Shown when undo is requested with nothing buffered
NOTHING_TO_UNDO_MESSAGE = "There is no floor removal to undo."
STALE_UNDO_MESSAGE = "The layout changed after the floor was removed; undo discarded."

# Floor grid rendering
GRID_COLUMNS = 6

# Mode options
MODES = ["View", "Edit"]
DEFAULT_MODE = "Edit"
