"""Base domain layer - shared kernel for all principle examples."""

from .composite import CapabilityComposite
from .exceptions import (
    CapabilityError,
    ConfigurationError,
    DomainException,
    ValidationError,
)

__all__ = [
    # Composite
    "CapabilityComposite",
    # Exceptions
    "DomainException",
    "ValidationError",
    "CapabilityError",
    "ConfigurationError",
]
