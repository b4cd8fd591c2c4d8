"""Time traveler."""
from ood_principles.domain.time_travel.ports import TimeTraveling
from ood_principles.helpers.logger import get_logger

logger = get_logger(__name__)


class EmmettBrown:
    """
    Travels in time using whatever device he is handed.

    He is given a TimeTraveling device, never a concrete DeLorean.
    """

    def __init__(self, time_machine: TimeTraveling):
        self._time_machine = time_machine

    @property
    def time_machine(self) -> TimeTraveling:
        return self._time_machine

    def travel_in_time(self, seconds: float) -> str:
        logger.debug("Travelling in time", seconds=seconds)
        return self._time_machine.travel_in_time(seconds)
