"""The five object-oriented design principles."""
from enum import Enum


class Principle(str, Enum):
    """SOLID principle enumeration, in acronym order."""
    SINGLE_RESPONSIBILITY = "srp"
    OPEN_CLOSED = "ocp"
    LISKOV_SUBSTITUTION = "lsp"
    INTERFACE_SEGREGATION = "isp"
    DEPENDENCY_INVERSION = "dip"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def summary(self) -> str:
        return _SUMMARIES[self]


_DISPLAY_NAMES = {
    Principle.SINGLE_RESPONSIBILITY: "The Single Responsibility Principle",
    Principle.OPEN_CLOSED: "The Open Closed Principle",
    Principle.LISKOV_SUBSTITUTION: "The Liskov Substitution Principle",
    Principle.INTERFACE_SEGREGATION: "The Interface Segregation Principle",
    Principle.DEPENDENCY_INVERSION: "The Dependency Inversion Principle",
}

_SUMMARIES = {
    Principle.SINGLE_RESPONSIBILITY: "A class should have one, and only one, reason to change.",
    Principle.OPEN_CLOSED: "You should be able to extend a classes behavior, without modifying it.",
    Principle.LISKOV_SUBSTITUTION: "Derived classes must be substitutable for their base classes.",
    Principle.INTERFACE_SEGREGATION: "Make fine grained interfaces that are client specific.",
    Principle.DEPENDENCY_INVERSION: "Depend on abstractions, not on concretions.",
}
