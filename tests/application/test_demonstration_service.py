import pytest

from ood_principles.application import (
    DemonstrationResult,
    Principle,
    PrincipleDemonstrationService,
)


@pytest.fixture
def service(demo_config):
    return PrincipleDemonstrationService(demo_config)


def test_single_responsibility(service):
    result = service.demonstrate(Principle.SINGLE_RESPONSIBILITY)

    assert isinstance(result, DemonstrationResult)
    assert result.principle == "srp"
    assert result.title == "The Single Responsibility Principle"
    assert result.outcome == {"door_states": ["closed", "open", "closed"]}


def test_open_closed(service):
    result = service.demonstrate(Principle.OPEN_CLOSED)

    assert result.outcome["laser_only"] == ["Ziiiiiip!"]
    assert result.outcome["laser_and_rocket"] == ["Ziiiiiip!", "Whoosh!"]


def test_liskov_substitution(service):
    result = service.demonstrate(Principle.LISKOV_SUBSTITUTION)

    assert result.outcome == {
        "object": None,
        "error_domain": "DOMAIN",
        "error_code": 1,
        "error_kind": "request",
        "request_url": "https://example.com/test",
    }


def test_interface_segregation(service):
    result = service.demonstrate(Principle.INTERFACE_SEGREGATION)

    assert result.outcome["payload"] == "Deployed BEAM space module at April 10, 2016, 11:23 UTC"
    assert result.outcome["landing"].startswith("Landed on a barge on the Atlantic Ocean")


def test_dependency_inversion(service):
    result = service.demonstrate(Principle.DEPENDENCY_INVERSION)

    assert result.outcome == {"trip": "Used Flux Capacitor and travelled in time by: 42.0s"}


def test_demonstrate_accepts_principle_value(service):
    assert service.demonstrate("ocp").principle == "ocp"


def test_demonstrate_unknown_principle(service):
    with pytest.raises(ValueError):
        service.demonstrate("xyz")


def test_demonstrate_all_in_acronym_order(service):
    results = service.demonstrate_all()
    assert [r.principle for r in results] == ["srp", "ocp", "lsp", "isp", "dip"]


def test_default_config_is_used_when_none_given():
    result = PrincipleDemonstrationService().demonstrate(Principle.LISKOV_SUBSTITUTION)
    assert result.outcome["request_url"] == "https://example.com/data.json"


def test_result_to_dict(service):
    data = service.demonstrate(Principle.OPEN_CLOSED).to_dict()
    assert set(data) == {"principle", "title", "summary", "outcome"}
    assert data["summary"] == "You should be able to extend a classes behavior, without modifying it."
