# ood_principles/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


DEFAULT_CONFIG = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": "${OOD_LOG_LEVEL:WARNING}",
        "destination": "${OOD_LOG_DESTINATION:stdout}",
        "file_path": "${OOD_LOG_DIR:.}/ood_principles.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Demonstration parameters
    "demo": {
        "request_url": "${OOD_DEMO_REQUEST_URL:https://example.com/data.json}",
        "travel_seconds": -1000000000.0,
    },
}
