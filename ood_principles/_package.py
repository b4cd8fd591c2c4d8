"""Package metadata and naming constants."""

PACKAGE_NAME = "ood-principles"
__version__ = "1.0.0"
DESCRIPTION = "Runnable illustrations of the SOLID object-oriented design principles"
