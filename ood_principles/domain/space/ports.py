"""Space mission ports.

Each port is as small as its client needs: a station fetching payload does
not see landing, a vehicle landing does not see the station.
"""
from abc import ABC, abstractmethod


class LandingSiteHaving(ABC):
    """Port for anything offering a landing site."""

    @property
    @abstractmethod
    def landing_site(self) -> str:
        """Description of the landing site."""


class Landing(ABC):
    """Port for anything that can land on a landing site."""

    @abstractmethod
    def land(self, on: LandingSiteHaving) -> str:
        """Land on the given site."""


class PayloadHaving(ABC):
    """Port for anything carrying a payload."""

    @property
    @abstractmethod
    def payload(self) -> str:
        """Description of the payload."""


class PayloadFetching(ABC):
    """Port for anything that can unload a vehicle's payload."""

    @abstractmethod
    def fetch_payload(self, vehicle: PayloadHaving) -> str:
        """Fetch the payload from the vehicle."""
