"""Weapon capability ports."""
from abc import ABC, abstractmethod


class CanShoot(ABC):
    """Port for anything that can shoot."""

    @abstractmethod
    def shoot(self) -> str:
        """Fire once and return the sound it makes."""
