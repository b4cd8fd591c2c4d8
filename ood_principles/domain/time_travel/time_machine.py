"""Time machines."""
from ood_principles.domain.time_travel.ports import TimeTraveling


class DeLorean(TimeTraveling):
    """A DMC DeLorean fitted with a flux capacitor."""

    def travel_in_time(self, seconds: float) -> str:
        return f"Used Flux Capacitor and travelled in time by: {seconds}s"
