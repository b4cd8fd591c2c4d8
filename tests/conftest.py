import json
import logging
import os

import pytest

from ood_principles.config.schemas import DemoConfig
from ood_principles.domain.door import Door
from ood_principles.domain.weapon import LaserBeam, RocketLauncher


@pytest.fixture
def door():
    return Door()


@pytest.fixture
def laser():
    return LaserBeam()


@pytest.fixture
def rocket():
    return RocketLauncher()


@pytest.fixture
def demo_config():
    return DemoConfig(request_url="https://example.com/test", travel_seconds=42.0)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables inherited from the shell."""
    for name in list(os.environ):
        if name.startswith("OOD_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path):
    """Write a configuration file and return its path."""
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
