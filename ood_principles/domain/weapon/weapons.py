"""Concrete weapons."""
from ood_principles.domain.weapon.ports import CanShoot


class LaserBeam(CanShoot):
    """A laser beam."""

    def shoot(self) -> str:
        return "Ziiiiiip!"


# Added after WeaponsComposite was written; nothing else had to change.
class RocketLauncher(CanShoot):
    """A rocket launcher."""

    def shoot(self) -> str:
        return "Whoosh!"
