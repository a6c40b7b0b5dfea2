"""Core configuration, logging and factory components."""

from proxyrules.core.config import Settings, get_settings, reset_settings
from proxyrules.core.factory import ComponentFactory, get_factory
from proxyrules.core.logging_config import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "ComponentFactory",
    "get_factory",
    "get_logger",
    "setup_logging",
]
