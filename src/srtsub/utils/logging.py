"""structlog loggers routed through the standard library ``srtsub`` logger."""

import logging

import structlog

from srtsub.utils.config import get_settings

ROOT_LOGGER = "srtsub"
_HANDLER_NAME = "srtsub-console"

# Silent unless the host application attaches handlers or calls setup_logging.
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that writes to the stdlib logger ``name``.

    The wrapped logger is fixed, so output never goes to structlog's default
    stdout printer; processors still come from the current structlog config.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def setup_logging(level: str | None = None) -> None:
    """Send srtsub events to stderr through a console renderer.

    Args:
        level: Level name such as "DEBUG"; defaults to the configured log_level

    Raises:
        ValueError: If the level name is unknown
    """
    name = (level or get_settings().log_level).upper()
    numeric = logging.getLevelNamesMapping().get(name)
    if numeric is None:
        raise ValueError(f"Unknown log level: {name}")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(numeric)
