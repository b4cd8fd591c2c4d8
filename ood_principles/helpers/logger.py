import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ood_principles.config.schemas import LoggingConfig


class DetailedFormatter(logging.Formatter):
    """Formatter adding caller information to every record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. If None, defaults are used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from ood_principles.config.schemas import LoggingConfig
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    handlers = []

    if config.writes_to_file:
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count
        )
        file_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(file_handler)

    if config.writes_to_stdout:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    configure_structlog()

    logger = structlog.get_logger("ood_principles")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
        log_file=config.file_path if config.writes_to_file else None,
    )

    return logger


def configure_structlog() -> None:
    """Route structlog through stdlib logging so the root logger decides what is emitted."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


# Library use without setup_logging stays on the stdlib defaults: nothing below WARNING, never stdout.
configure_structlog()
