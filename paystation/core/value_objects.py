"""
Value Objects for the pay station.

Immutable objects that represent values in the domain.
Value objects are compared by value, not by identity.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any

from paystation.core.exceptions import InvalidCoinError


# =============================================================================
# Enums
# =============================================================================


class Coin(IntEnum):
    """Accepted coin denominations, valued in cents."""

    NICKEL = 5
    DIME = 10
    QUARTER = 25

    @classmethod
    def from_value(cls, value: Any) -> "Coin":
        """
        Resolve a cent value to a coin.

        Args:
            value: Coin value in cents.

        Returns:
            The matching Coin.

        Raises:
            InvalidCoinError: If the value is not an accepted denomination.
        """
        # Enum lookup is by hash, so 5.0 would otherwise resolve to NICKEL
        if not isinstance(value, int):
            raise InvalidCoinError(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidCoinError(value) from None


class StationPhase(Enum):
    """Phase of the current transaction."""

    IDLE = auto()           # Nothing inserted since the last reset
    ACCUMULATING = auto()   # At least one coin accepted


# =============================================================================
# Receipt Value Object
# =============================================================================


@dataclass(frozen=True)
class Receipt:
    """
    Proof of purchase issued by a buy.

    Attributes:
        value: Parking time bought, in minutes.
    """

    value: int = 0

    def __post_init__(self) -> None:
        """Validate the parking time."""
        if self.value < 0:
            raise ValueError("Parking time cannot be negative")

    def __str__(self) -> str:
        return f"Receipt: {self.value} min"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"minutes": self.value}


# =============================================================================
# Station Status Value Object
# =============================================================================


@dataclass(frozen=True)
class StationStatus:
    """
    Immutable snapshot of a pay station at a point in time.

    Attributes:
        phase: Transaction phase.
        minutes: Parking time currently displayed.
        cents: Cents inserted since the last reset.
        contents: Coin counts of the current transaction as (coin, count) pairs.
    """

    phase: StationPhase = StationPhase.IDLE
    minutes: int = 0
    cents: int = 0
    contents: tuple[tuple[Coin, int], ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "phase": self.phase.name.lower(),
            "minutes": self.minutes,
            "cents": self.cents,
            "contents": {str(int(coin)): count for coin, count in self.contents},
        }
