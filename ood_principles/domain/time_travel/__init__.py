"""Time travel bounded context - dependency inversion example."""

from .ports import TimeTraveling
from .time_machine import DeLorean
from .traveler import EmmettBrown

__all__ = [
    "TimeTraveling",
    "DeLorean",
    "EmmettBrown",
]
