"""Door value objects."""
from enum import Enum


class DoorState(str, Enum):
    """Door state enumeration."""
    CLOSED = "closed"
    OPEN = "open"
