"""Door capability ports."""
from abc import ABC, abstractmethod


class CanBeOpened(ABC):
    """Port for anything that can be opened."""

    @abstractmethod
    def open(self) -> None:
        """Open the object."""


class CanBeClosed(ABC):
    """Port for anything that can be closed."""

    @abstractmethod
    def close(self) -> None:
        """Close the object."""
