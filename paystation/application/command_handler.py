"""
Command Handler - Routes station commands to pay station operations.

Provides command routing with validation and error handling for
external callers (CLI, UI, hardware drivers).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional

from paystation.core.exceptions import PayStationError
from paystation.core.interfaces import PayStation
from paystation.loggers import logger


# Type alias for command handlers
CommandHandlerFunc = Callable[..., Any]


@dataclass
class CommandResponse:
    """
    Reply to one station command.

    Attributes:
        command_id: Echo of the caller's command_id.
        success: False when the command was refused or the station rejected it.
        message: Display text, e.g. "14 min" or "Invalid coin: 17".
        data: Minutes, cents, receipt, returned coins or error details.
    """

    command_id: Optional[Any] = None
    success: bool = False
    message: Optional[str] = None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CommandDefinition:
    """A station operation reachable by name."""

    name: str
    handler: CommandHandlerFunc
    required_args: list[str]
    description: str = ""

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "required_args": self.required_args,
            "description": self.description,
        }


class CommandHandler:
    """
    Routes commands to a pay station.

    Each handler returns a (message, data) pair; station errors are
    turned into failed responses here and nowhere else.
    """

    def __init__(self, station: PayStation) -> None:
        """
        Initialize the command handler.

        Args:
            station: The pay station to drive.
        """
        self._station = station
        self._commands: dict[str, CommandDefinition] = {}
        self._register_default_commands()

    @property
    def station(self) -> PayStation:
        """Get the driven pay station."""
        return self._station

    def _register_default_commands(self) -> None:
        """Register all default command handlers."""
        # Transaction flow
        self.register(
            "add_payment",
            self._add_payment,
            ["coin"],
            "Insert a coin of 5, 10 or 25 cents",
        )
        self.register(
            "buy",
            self._buy,
            [],
            "Issue a receipt and end the transaction",
        )
        self.register(
            "cancel",
            self._cancel,
            [],
            "Return the inserted coins and end the transaction",
        )

        # Display
        self.register(
            "read_display",
            self._read_display,
            [],
            "Get the parking time bought, in minutes",
        )
        self.register(
            "read_display_in_cents",
            self._read_display_in_cents,
            [],
            "Get the amount inserted, in cents",
        )
        self.register(
            "status",
            self._status,
            [],
            "Get a snapshot of the station",
        )

        # Administration
        self.register(
            "empty",
            self._empty,
            [],
            "Collect the money inserted since the last reset",
        )

    def register(
        self,
        command_name: str,
        handler: CommandHandlerFunc,
        required_args: list[str],
        description: str = "",
    ) -> None:
        """
        Expose a station operation under a command name.

        The handler is called with the required arguments taken from the
        command's data and must return a (message, data) pair.
        """
        self._commands[command_name] = CommandDefinition(
            name=command_name,
            handler=handler,
            required_args=required_args,
            description=description,
        )

    def get_available_commands(self) -> list[dict[str, Any]]:
        """Describe every registered command, in registration order."""
        return [definition.describe() for definition in self._commands.values()]

    def execute(self, command_data: dict[str, Any]) -> dict[str, Any]:
        """
        Execute a command based on command data.

        Args:
            command_data: Dictionary containing 'command', 'command_id', and 'data'.

        Returns:
            Response dictionary with execution result.
        """
        command = command_data.get("command")
        command_id = command_data.get("command_id")
        data = command_data.get("data", {}) or {}

        response = CommandResponse(command_id=command_id)

        if command not in self._commands:
            logger.warning(f"Unknown command: {command}")
            response.message = f"Unknown command: {command}"
            return response.to_dict()

        definition = self._commands[command]

        try:
            kwargs = {arg: data.get(arg) for arg in definition.required_args}
            missing = [arg for arg in definition.required_args if kwargs.get(arg) is None]
            if missing:
                response.message = f"Missing required arguments: {missing}"
                return response.to_dict()

            response.message, response.data = definition.handler(**kwargs)
            response.success = True
        except PayStationError as e:
            logger.warning(f"Command '{command}' rejected: {e.message}")
            response.message = e.message
            response.data = e.to_dict()
        except Exception as e:
            logger.error(f"Error executing command '{command}': {e}")
            response.message = f"Error: {e}"

        return response.to_dict()

    # =========================================================================
    # Handlers
    # =========================================================================

    def _add_payment(self, coin: Any) -> tuple[str, dict[str, Any]]:
        self._station.add_payment(coin)
        minutes = self._station.read_display()
        return f"Coin accepted. Time bought: {minutes} min", self._snapshot()

    def _buy(self) -> tuple[str, dict[str, Any]]:
        receipt = self._station.buy()
        return str(receipt), receipt.to_dict()

    def _cancel(self) -> tuple[str, dict[str, int]]:
        returned = self._station.cancel()
        coins = {str(int(coin)): count for coin, count in sorted(returned.items())}
        return f"Returned {sum(returned.values())} coin(s)", coins

    def _read_display(self) -> tuple[str, int]:
        minutes = self._station.read_display()
        return f"{minutes} min", minutes

    def _read_display_in_cents(self) -> tuple[str, int]:
        cents = self._station.read_display_in_cents()
        return f"{cents} cents", cents

    def _empty(self) -> tuple[str, int]:
        collected = self._station.empty()
        return f"Collected {collected} cents", collected

    def _status(self) -> tuple[str, dict[str, Any]]:
        return "Station status", self._snapshot()

    def _snapshot(self) -> dict[str, Any]:
        return self._station.status().to_dict()


def pay_station_commands(
    command_data: dict[str, Any],
    station: PayStation,
) -> dict[str, Any]:
    """
    Execute a single command on a pay station.

    Args:
        command_data: Dictionary containing command name, ID, and data.
        station: The pay station to drive.

    Returns:
        Response dictionary with execution result.
    """
    handler = CommandHandler(station)
    return handler.execute(command_data)
