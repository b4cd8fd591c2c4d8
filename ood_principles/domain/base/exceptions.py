# ood_principles/domain/base/exceptions.py


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    pass


class CapabilityError(DomainException):
    """Raised by an implementor when a capability operation cannot complete."""
    def __init__(self, capability: str, message: str):
        super().__init__(f"{capability} failed: {message}")
        self.capability = capability


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    pass
