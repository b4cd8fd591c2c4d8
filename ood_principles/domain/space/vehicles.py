"""Space mission participants."""
from ood_principles.domain.space.ports import (
    Landing,
    LandingSiteHaving,
    PayloadFetching,
    PayloadHaving,
)


class InternationalSpaceStation(PayloadFetching):
    """Fetches payload; has no idea the vehicle can also land."""

    def fetch_payload(self, vehicle: PayloadHaving) -> str:
        return f"Deployed {vehicle.payload} at April 10, 2016, 11:23 UTC"


class OfCourseIStillLoveYouBarge(LandingSiteHaving):
    """A drone ship offering a landing site."""

    @property
    def landing_site(self) -> str:
        return "a barge on the Atlantic Ocean"


class SpaceXCRS8(Landing, PayloadHaving):
    """Carries payload and lands; knows only the landing site of what it lands on."""

    @property
    def payload(self) -> str:
        return "BEAM space module"

    def land(self, on: LandingSiteHaving) -> str:
        return f"Landed on {on.landing_site} at April 8, 2016 20:52 UTC"
