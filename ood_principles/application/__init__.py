"""Application layer - use cases built on the domain examples."""

from .demonstration_service import PrincipleDemonstrationService
from .dto import DemonstrationResult
from .principles import Principle

__all__ = [
    "PrincipleDemonstrationService",
    "DemonstrationResult",
    "Principle",
]
