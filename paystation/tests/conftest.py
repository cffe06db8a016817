"""
Pytest configuration for pay station tests.
"""

import pytest

from paystation.application.command_handler import CommandHandler
from paystation.domain.pay_station import ParkingPayStation
from paystation.infrastructure.settings import PayStationSettings


@pytest.fixture
def station() -> ParkingPayStation:
    """A fresh pay station with the default tariff."""
    return ParkingPayStation(PayStationSettings())


@pytest.fixture
def legacy_station() -> ParkingPayStation:
    """A fresh pay station recording each denomination only once."""
    return ParkingPayStation(PayStationSettings(legacy_coin_tally=True))


@pytest.fixture
def handler(station: ParkingPayStation) -> CommandHandler:
    """A command handler driving the fresh pay station."""
    return CommandHandler(station)
