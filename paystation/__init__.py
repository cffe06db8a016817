"""
Parking pay station.

A coin-operated pay station that converts inserted coins into parking
time and issues receipts.
"""

from .core import (
    Coin,
    InvalidCoinError,
    PayStation,
    PayStationError,
    Receipt,
    StationPhase,
    StationStatus,
)
from .domain import ParkingPayStation


__all__ = [
    "Coin",
    "InvalidCoinError",
    "ParkingPayStation",
    "PayStation",
    "PayStationError",
    "Receipt",
    "StationPhase",
    "StationStatus",
]
