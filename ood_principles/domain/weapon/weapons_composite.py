"""Weapons composite."""
from typing import List, Sequence, Tuple

from ood_principles.domain.base.composite import CapabilityComposite
from ood_principles.domain.weapon.ports import CanShoot


class WeaponsComposite(CapabilityComposite[CanShoot]):
    """Fires every weapon it holds, all at once."""

    def __init__(self, weapons: Sequence[CanShoot]):
        super().__init__(weapons)

    @property
    def weapons(self) -> Tuple[CanShoot, ...]:
        return self.items

    def shoot(self) -> List[str]:
        """Shoot each weapon in order and collect the sounds."""
        return self._dispatch(lambda weapon: weapon.shoot())
