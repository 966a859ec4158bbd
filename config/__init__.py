"""
Initializes the config package.

The config package is responsible for loading and managing application-wide
configurations, making them accessible throughout the application.
"""

# This import is done to facilitate cleaner imports in the project
# `from config import AppConfig` instead of `from config.app import AppConfig`
from .app import AppConfig
from .env import EnvConfig
from .log import setup_logger

__all__ = ["AppConfig", "EnvConfig", "setup_logger"]
