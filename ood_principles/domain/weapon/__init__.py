"""Weapon bounded context - open/closed example."""

from .ports import CanShoot
from .weapons import LaserBeam, RocketLauncher
from .weapons_composite import WeaponsComposite

__all__ = [
    "CanShoot",
    "LaserBeam",
    "RocketLauncher",
    "WeaponsComposite",
]
