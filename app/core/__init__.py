"""
Core module exports.
"""

from .config import (
    Settings,
    GoogleSettings,
    BrowserSettings,
    BotSettings,
)
from .logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "GoogleSettings",
    "BrowserSettings",
    "BotSettings",
    "get_logger",
    "setup_logging",
]
