"""
Infrastructure layer - Configuration.
"""

from .settings import (
    LoggingSettings,
    PayStationSettings,
    Settings,
    get_settings,
)


__all__ = [
    "LoggingSettings",
    "PayStationSettings",
    "Settings",
    "get_settings",
]
