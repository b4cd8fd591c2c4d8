import pytest

from ood_principles.domain.base.exceptions import CapabilityError
from ood_principles.domain.time_travel import DeLorean, EmmettBrown, TimeTraveling


class PhoneBooth(TimeTraveling):
    def travel_in_time(self, seconds: float) -> str:
        return f"Excellent! {seconds}s"


class BrokenFluxCapacitor(TimeTraveling):
    def travel_in_time(self, seconds: float) -> str:
        raise CapabilityError("travel_in_time", "1.21 gigawatts required")


def test_delorean_travels():
    assert DeLorean().travel_in_time(60.0) == "Used Flux Capacitor and travelled in time by: 60.0s"


def test_emmett_brown_uses_given_machine():
    doc = EmmettBrown(time_machine=DeLorean())
    assert doc.travel_in_time(-3600.0) == "Used Flux Capacitor and travelled in time by: -3600.0s"


def test_emmett_brown_accepts_any_time_machine():
    doc = EmmettBrown(time_machine=PhoneBooth())
    assert doc.travel_in_time(1.0) == "Excellent! 1.0s"


def test_emmett_brown_keeps_machine_reference():
    machine = DeLorean()
    doc = EmmettBrown(machine)
    assert doc.time_machine is machine


def test_emmett_brown_propagates_failure():
    doc = EmmettBrown(BrokenFluxCapacitor())
    with pytest.raises(CapabilityError, match="gigawatts"):
        doc.travel_in_time(1.0)
