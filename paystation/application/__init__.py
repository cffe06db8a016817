"""
Application layer - Command routing for external callers.
"""

from .command_handler import (
    CommandHandler,
    CommandResponse,
    pay_station_commands,
)


__all__ = [
    "CommandHandler",
    "CommandResponse",
    "pay_station_commands",
]
