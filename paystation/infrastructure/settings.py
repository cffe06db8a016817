"""
Application settings.

Provides typed configuration grouped into frozen dataclasses.
"""

from dataclasses import dataclass, field
from typing import Optional

from paystation.configs import (
    APP_NAME,
    CENTS_PER_UNIT,
    LOG_FILE,
    LOKI_URL,
    MINUTES_PER_UNIT,
)


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class PayStationSettings:
    """
    Tariff and coin handling settings.

    Attributes:
        cents_per_unit: Cents that buy one unit of parking time.
        minutes_per_unit: Minutes granted per unit.
        legacy_coin_tally: Record every inserted denomination with a count
            of 1 instead of counting repeats (compatibility mode).
    """

    cents_per_unit: int = CENTS_PER_UNIT
    minutes_per_unit: int = MINUTES_PER_UNIT
    legacy_coin_tally: bool = False

    def __post_init__(self) -> None:
        """Validate the tariff."""
        if self.cents_per_unit <= 0:
            raise ValueError("cents_per_unit must be positive")
        if self.minutes_per_unit < 0:
            raise ValueError("minutes_per_unit cannot be negative")

    def minutes_for(self, cents: int) -> int:
        """Get the parking time bought by an amount, truncated to whole units."""
        return cents // self.cents_per_unit * self.minutes_per_unit


@dataclass(frozen=True)
class LoggingSettings:
    """Logging targets."""

    app: str = APP_NAME
    log_file: Optional[str] = LOG_FILE
    loki_url: Optional[str] = LOKI_URL


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    pay_station: PayStationSettings = field(default_factory=PayStationSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
