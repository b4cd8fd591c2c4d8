"""Application service running the principle demonstrations."""
from typing import Any, Callable, Dict, List, Optional

from ood_principles.application.dto import DemonstrationResult
from ood_principles.application.principles import Principle
from ood_principles.config.schemas import DemoConfig
from ood_principles.domain.door import Door, DoorCloser, DoorOpener
from ood_principles.domain.request import fetch_object_or_error
from ood_principles.domain.space import (
    InternationalSpaceStation,
    OfCourseIStillLoveYouBarge,
    SpaceXCRS8,
)
from ood_principles.domain.time_travel import DeLorean, EmmettBrown
from ood_principles.domain.weapon import LaserBeam, RocketLauncher, WeaponsComposite
from ood_principles.helpers.logger import get_logger


class PrincipleDemonstrationService:
    """
    Runs the scenario illustrating each principle.

    Every scenario builds its objects, exercises them through their ports
    and reports what happened as plain data.
    """

    def __init__(self, config: Optional[DemoConfig] = None):
        self._config = config or DemoConfig()
        self._logger = get_logger(__name__)
        self._scenarios: Dict[Principle, Callable[[], Dict[str, Any]]] = {
            Principle.SINGLE_RESPONSIBILITY: self._single_responsibility,
            Principle.OPEN_CLOSED: self._open_closed,
            Principle.LISKOV_SUBSTITUTION: self._liskov_substitution,
            Principle.INTERFACE_SEGREGATION: self._interface_segregation,
            Principle.DEPENDENCY_INVERSION: self._dependency_inversion,
        }

    def demonstrate(self, principle: Principle) -> DemonstrationResult:
        """Run one principle's scenario."""
        principle = Principle(principle)
        self._logger.info("Running demonstration", principle=principle.value)
        outcome = self._scenarios[principle]()
        return DemonstrationResult(
            principle=principle.value,
            title=principle.display_name,
            summary=principle.summary,
            outcome=outcome,
        )

    def demonstrate_all(self) -> List[DemonstrationResult]:
        """Run every scenario in acronym order."""
        return [self.demonstrate(principle) for principle in Principle]

    def _single_responsibility(self) -> Dict[str, Any]:
        door = Door()
        door_opener = DoorOpener(door=door)
        door_closer = DoorCloser(door=door)

        states = [door.state.value]
        door_opener.execute()
        states.append(door.state.value)
        door_closer.execute()
        states.append(door.state.value)
        return {"door_states": states}

    def _open_closed(self) -> Dict[str, Any]:
        laser = LaserBeam()
        weapons = WeaponsComposite([laser])
        laser_only = weapons.shoot()

        # Rocket support needs no change to WeaponsComposite.
        rocket = RocketLauncher()
        weapons = WeaponsComposite([laser, rocket])
        return {"laser_only": laser_only, "laser_and_rocket": weapons.shoot()}

    def _liskov_substitution(self) -> Dict[str, Any]:
        result = fetch_object_or_error(self._config.request_url)

        # A plain error from the caller's perspective...
        error_code = result.error.code if result.error else None

        # ...that still tells which request failed.
        request_url = None
        if result.error is not None and result.error.is_request_error:
            request_url = result.error.request.url

        return {
            "object": result.object,
            "error_domain": result.error.domain if result.error else None,
            "error_code": error_code,
            "error_kind": result.error.kind.value if result.error else None,
            "request_url": request_url,
        }

    def _interface_segregation(self) -> Dict[str, Any]:
        station = InternationalSpaceStation()
        barge = OfCourseIStillLoveYouBarge()
        spacex_crs8 = SpaceXCRS8()
        return {
            "payload": station.fetch_payload(vehicle=spacex_crs8),
            "landing": spacex_crs8.land(on=barge),
        }

    def _dependency_inversion(self) -> Dict[str, Any]:
        doc_brown = EmmettBrown(time_machine=DeLorean())
        return {"trip": doc_brown.travel_in_time(self._config.travel_seconds)}
