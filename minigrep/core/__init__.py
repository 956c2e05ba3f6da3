"""
Core module providing foundational components.

This module contains the search configuration resolver, the ambient
configuration loader, centralized logging setup, and the exception
hierarchy. It has no internal dependencies.
"""

from .config_loader import (
    get_config,
    build,
    ignore_case_from_env,
    AppConfig,
    SearchConfig
)
from .logger import get_logger
from .exceptions import (
    MinigrepError,
    ConfigurationError,
    InsufficientArgumentsError,
    FileReadError
)

__all__ = [
    "get_config",
    "build",
    "ignore_case_from_env",
    "AppConfig",
    "SearchConfig",
    "get_logger",
    "MinigrepError",
    "ConfigurationError",
    "InsufficientArgumentsError",
    "FileReadError"
]
