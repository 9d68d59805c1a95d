"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import ReactcordError, ElementConfigurationError, InvalidTargetError
from .logging_config import configure_logging, get_logger, LogContext
from .id import CustomID, new_custom_id, split_custom_id

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ReactcordError",
    "ElementConfigurationError",
    "InvalidTargetError",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # IDs
    "CustomID",
    "new_custom_id",
    "split_custom_id",
]
