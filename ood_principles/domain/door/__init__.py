"""Door bounded context - single responsibility example."""

from .door import Door
from .operators import DoorCloser, DoorOpener
from .ports import CanBeClosed, CanBeOpened
from .value_objects import DoorState

__all__ = [
    "CanBeOpened",
    "CanBeClosed",
    "Door",
    "DoorState",
    "DoorOpener",
    "DoorCloser",
]
