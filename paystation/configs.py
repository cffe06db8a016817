"""
Configuration module for the pay station.

This module provides centralized constants for the tariff and for
the logging targets. Typed settings built on top of these live in
``paystation.infrastructure.settings``.
"""

from typing import Final, Optional


# =============================================================================
# Tariff Configuration
# =============================================================================

# Two minutes of parking for every five cents inserted
CENTS_PER_UNIT: Final[int] = 5
MINUTES_PER_UNIT: Final[int] = 2


# =============================================================================
# Logging Configuration
# =============================================================================

APP_NAME: Final[str] = "pay_station"
LOGGER_NAME: Final[str] = "PAY_STATION"

# Both targets are disabled unless set
LOG_FILE: Final[Optional[str]] = None
LOKI_URL: Final[Optional[str]] = None
