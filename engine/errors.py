"""Exception hierarchy for the inventory engine."""

from typing import Any, Dict, Optional


class InventoryError(Exception):
    """Base exception for all inventory engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NumberingExhaustedError(InventoryError):
    """No free room number left in a floor's numbering range."""

    def __init__(self, floor_num: int, max_suffix: int):
        self.floor_num = floor_num
        super().__init__(
            f"Floor {floor_num} has no free room number left (suffixes 01-{max_suffix:02d} are all taken).",
            details={"floor_num": floor_num, "max_suffix": max_suffix},
        )


class SettingsFormatError(InventoryError):
    """A saved hotel configuration does not have the expected shape."""
