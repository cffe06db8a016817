"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces (Protocols)
- Value Objects
"""

from .exceptions import (
    PayStationError,
    InvalidCoinError,
)
from .interfaces import (
    PayStation,
)
from .value_objects import (
    Coin,
    Receipt,
    StationPhase,
    StationStatus,
)


__all__ = [
    # Exceptions
    "PayStationError",
    "InvalidCoinError",
    # Interfaces
    "PayStation",
    # Value Objects
    "Coin",
    "Receipt",
    "StationPhase",
    "StationStatus",
]
