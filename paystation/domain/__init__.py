"""
Domain layer - Business logic and domain models.
"""

from .pay_station import (
    ParkingPayStation,
)


__all__ = [
    "ParkingPayStation",
]
