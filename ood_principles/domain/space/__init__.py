"""Space bounded context - interface segregation example."""

from .ports import Landing, LandingSiteHaving, PayloadFetching, PayloadHaving
from .vehicles import InternationalSpaceStation, OfCourseIStillLoveYouBarge, SpaceXCRS8

__all__ = [
    "LandingSiteHaving",
    "Landing",
    "PayloadHaving",
    "PayloadFetching",
    "InternationalSpaceStation",
    "OfCourseIStillLoveYouBarge",
    "SpaceXCRS8",
]
