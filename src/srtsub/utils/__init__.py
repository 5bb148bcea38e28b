"""Utility modules."""

from srtsub.utils.config import Settings, get_settings
from srtsub.utils.logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_logger",
    "get_settings",
    "setup_logging",
]
