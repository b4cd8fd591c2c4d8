"""Single-purpose door operators.

Each operator knows one capability of the door and nothing else: the opener
cannot close, the closer cannot open, and neither knows the concrete type.
"""
from ood_principles.domain.door.ports import CanBeClosed, CanBeOpened
from ood_principles.helpers.logger import get_logger

logger = get_logger(__name__)


class DoorOpener:
    """Opens whatever it is given."""

    def __init__(self, door: CanBeOpened):
        self._door = door

    @property
    def door(self) -> CanBeOpened:
        return self._door

    def execute(self) -> None:
        logger.debug("Opening", target=repr(self._door))
        return self._door.open()


class DoorCloser:
    """Closes whatever it is given."""

    def __init__(self, door: CanBeClosed):
        self._door = door

    @property
    def door(self) -> CanBeClosed:
        return self._door

    def execute(self) -> None:
        logger.debug("Closing", target=repr(self._door))
        return self._door.close()
