"""
Pay Station - Coin-operated parking pay station.

Accepts coins, converts the inserted amount into parking minutes, and
ends each transaction with a buy (receipt), a cancel (coins returned)
or an empty (revenue drained).
"""

from __future__ import annotations

from typing import Optional, Union

from paystation.core.exceptions import InvalidCoinError
from paystation.core.value_objects import Coin, Receipt, StationPhase, StationStatus
from paystation.infrastructure.settings import PayStationSettings, get_settings
from paystation.loggers import logger


class ParkingPayStation:
    """
    Stateful ledger of a single pay station.

    One instance serves any number of consecutive transactions. A
    transaction starts with the first coin after a reset and ends with
    buy() or cancel(); empty() resets regardless of the transaction.

    The station is not thread-safe. Callers sharing it must hold one
    lock per station for the duration of each operation.
    """

    def __init__(self, settings: Optional[PayStationSettings] = None) -> None:
        """
        Initialize an idle pay station.

        Args:
            settings: Tariff settings; defaults to the application settings.
        """
        self._settings = settings or get_settings().pay_station
        self._inserted_so_far = 0
        self._time_bought = 0
        self._current_contents: dict[Coin, int] = {}

    @property
    def settings(self) -> PayStationSettings:
        """Get the tariff settings."""
        return self._settings

    @property
    def phase(self) -> StationPhase:
        """Get the current transaction phase."""
        if self._inserted_so_far == 0:
            return StationPhase.IDLE
        return StationPhase.ACCUMULATING

    def add_payment(self, coin_value: Union[int, Coin]) -> None:
        """
        Insert a coin.

        Args:
            coin_value: Coin value in cents.

        Raises:
            InvalidCoinError: If the coin is not 5, 10 or 25 cents.
        """
        try:
            coin = Coin.from_value(coin_value)
        except InvalidCoinError:
            logger.warning(f"Rejected coin: {coin_value!r}")
            raise

        if self._settings.legacy_coin_tally:
            self._current_contents[coin] = 1
        else:
            self._current_contents[coin] = self._current_contents.get(coin, 0) + 1
        self._inserted_so_far += coin.value
        self._time_bought = self._settings.minutes_for(self._inserted_so_far)

        logger.info(
            f"Accepted {coin.value} cents. "
            f"Total: {self._inserted_so_far} cents, {self._time_bought} min"
        )

    def read_display(self) -> int:
        """Get the parking time bought so far, in minutes."""
        return self._time_bought

    def read_display_in_cents(self) -> int:
        """Get the amount inserted so far, in cents."""
        return self._inserted_so_far

    def buy(self) -> Receipt:
        """
        Issue a receipt for the time bought and end the transaction.

        Returns:
            Receipt carrying the minutes displayed before the call.
        """
        receipt = Receipt(self._time_bought)
        logger.info(f"Receipt issued: {receipt.value} min for {self._inserted_so_far} cents")
        self._reset()
        return receipt

    def cancel(self) -> dict[Coin, int]:
        """
        Return the coins of the current transaction and end it.

        Returns:
            Count per coin inserted since the last reset. Coins that were
            not inserted are absent.
        """
        returned = dict(self._current_contents)
        logger.info(f"Transaction cancelled. Returning {self._inserted_so_far} cents")
        self._reset()
        return returned

    def empty(self) -> int:
        """
        Drain the station.

        Returns:
            Cents inserted since the last reset.
        """
        collected = self._inserted_so_far
        logger.info(f"Station emptied. Collected: {collected} cents")
        self._reset()
        return collected

    def status(self) -> StationStatus:
        """Get a snapshot of the station state."""
        return StationStatus(
            phase=self.phase,
            minutes=self._time_bought,
            cents=self._inserted_so_far,
            contents=tuple(sorted(self._current_contents.items())),
        )

    def _reset(self) -> None:
        self._inserted_so_far = 0
        self._time_bought = 0
        self._current_contents.clear()
