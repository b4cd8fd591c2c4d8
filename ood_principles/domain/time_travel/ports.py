"""Time travel port."""
from abc import ABC, abstractmethod


class TimeTraveling(ABC):
    """Port for devices able to travel in time."""

    @abstractmethod
    def travel_in_time(self, seconds: float) -> str:
        """Travel by the given number of seconds and describe the trip."""
