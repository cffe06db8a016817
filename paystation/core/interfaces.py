"""
Interfaces (Protocols) for the pay station.

Defines the pay station contract using Python's Protocol for
structural subtyping, so alternative implementations (test doubles,
hardware-backed stations) need no common base class.
"""

from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

from paystation.core.value_objects import Coin, Receipt, StationStatus


@runtime_checkable
class PayStation(Protocol):
    """
    Contract of a coin-operated parking pay station.

    Responsibilities: accept payment, calculate parking time based on
    payment, know the amount inserted, issue receipts, and handle buy,
    cancel and empty events.
    """

    def add_payment(self, coin_value: Union[int, Coin]) -> None:
        """
        Insert a coin.

        Raises:
            InvalidCoinError: If the coin is not 5, 10 or 25 cents.
        """
        ...

    def read_display(self) -> int:
        """Get the parking time bought so far, in minutes."""
        ...

    def read_display_in_cents(self) -> int:
        """Get the amount inserted so far, in cents."""
        ...

    def buy(self) -> Receipt:
        """Issue a receipt for the time bought and end the transaction."""
        ...

    def cancel(self) -> dict[Coin, int]:
        """Return the coins of the current transaction and end it."""
        ...

    def empty(self) -> int:
        """Drain the station and return the cents collected since the last reset."""
        ...

    def status(self) -> StationStatus:
        """Get a snapshot of the station state."""
        ...
