"""Door entity."""
from ood_principles.domain.door.ports import CanBeClosed, CanBeOpened
from ood_principles.domain.door.value_objects import DoorState


class Door(CanBeOpened, CanBeClosed):
    """
    A door with encapsulated state.

    The state starts as CLOSED and only changes through open() and close().
    Both operations are idempotent.
    """

    def __init__(self):
        self._state = DoorState.CLOSED

    @property
    def state(self) -> DoorState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state == DoorState.OPEN

    def open(self) -> None:
        self._state = DoorState.OPEN

    def close(self) -> None:
        self._state = DoorState.CLOSED

    def __repr__(self) -> str:
        return f"Door(state={self._state.value})"
