"""
Unit tests for command routing.
"""

from paystation.application.command_handler import (
    CommandHandler,
    CommandResponse,
    pay_station_commands,
)
from paystation.core.value_objects import StationStatus
from paystation.domain.pay_station import ParkingPayStation


class TestCommandResponse:
    """Tests for CommandResponse."""

    def test_to_dict(self):
        """Test converting a response to a dict."""
        response = CommandResponse(command_id=7, success=True, message="ok", data=1)
        assert response.to_dict() == {
            "command_id": 7,
            "success": True,
            "message": "ok",
            "data": 1,
        }


class TestCommandHandler:
    """Tests for CommandHandler."""

    def test_available_commands(self, handler):
        """Test every station operation is registered."""
        names = {cmd["name"] for cmd in handler.get_available_commands()}
        assert names == {
            "add_payment",
            "buy",
            "cancel",
            "read_display",
            "read_display_in_cents",
            "status",
            "empty",
        }

    def test_add_payment(self, handler):
        """Test inserting a coin through a command."""
        response = handler.execute(
            {"command": "add_payment", "command_id": 1, "data": {"coin": 25}}
        )
        assert response["success"] is True
        assert response["command_id"] == 1
        assert response["data"]["minutes"] == 10
        assert response["data"]["contents"] == {"25": 1}

    def test_invalid_coin(self, handler):
        """Test an invalid coin yields a failed response with error details."""
        response = handler.execute({"command": "add_payment", "data": {"coin": 17}})
        assert response["success"] is False
        assert response["message"] == "Invalid coin: 17"
        assert response["data"]["error"] == "InvalidCoinError"
        assert handler.station.read_display_in_cents() == 0

    def test_missing_argument(self, handler):
        """Test add_payment without a coin is refused."""
        response = handler.execute({"command": "add_payment"})
        assert response["success"] is False
        assert "coin" in response["message"]

    def test_unknown_command(self, handler):
        """Test an unknown command is refused."""
        response = handler.execute({"command": "refund", "command_id": 3})
        assert response["success"] is False
        assert response["command_id"] == 3
        assert "Unknown command" in response["message"]

    def test_buy_flow(self, handler):
        """Test a full buy transaction through commands."""
        for coin in (5, 10, 25):
            handler.execute({"command": "add_payment", "data": {"coin": coin}})
        assert handler.execute({"command": "read_display"})["data"] == 16
        assert handler.execute({"command": "read_display_in_cents"})["data"] == 40

        response = handler.execute({"command": "buy"})
        assert response["success"] is True
        assert response["data"] == {"minutes": 16}
        assert handler.execute({"command": "read_display"})["data"] == 0

    def test_cancel_flow(self, handler):
        """Test cancel returns coin counts keyed by cent value."""
        for coin in (10, 10, 5):
            handler.execute({"command": "add_payment", "data": {"coin": coin}})
        response = handler.execute({"command": "cancel"})
        assert response["success"] is True
        assert response["data"] == {"5": 1, "10": 2}
        assert response["message"] == "Returned 3 coin(s)"

    def test_empty(self, handler):
        """Test empty reports the cents collected."""
        handler.execute({"command": "add_payment", "data": {"coin": 25}})
        handler.execute({"command": "add_payment", "data": {"coin": 25}})
        response = handler.execute({"command": "empty"})
        assert response["data"] == 50
        assert handler.execute({"command": "empty"})["data"] == 0

    def test_status(self, handler):
        """Test the status command returns a snapshot."""
        response = handler.execute({"command": "status"})
        assert response["data"]["phase"] == "idle"

    def test_custom_command(self, handler):
        """Test registering an extra command."""
        handler.register("ping", lambda: ("pong", None), [], "Health check")
        response = handler.execute({"command": "ping"})
        assert response["success"] is True
        assert response["message"] == "pong"

    def test_malformed_data(self, handler):
        """Test data that is not a mapping yields a failed response."""
        response = handler.execute(
            {"command": "add_payment", "command_id": 9, "data": [25]}
        )
        assert response["success"] is False
        assert response["command_id"] == 9
        assert response["message"].startswith("Error:")
        assert handler.station.read_display_in_cents() == 0

    def test_status_uses_protocol(self):
        """Test any PayStation implementation can report its status."""
        class StubStation:
            def status(self):
                return StationStatus(minutes=4, cents=10)

        response = CommandHandler(StubStation()).execute({"command": "status"})
        assert response["data"]["minutes"] == 4
        assert response["data"]["cents"] == 10

    def test_unexpected_error(self, handler):
        """Test an unexpected handler error yields a failed response."""
        def broken():
            raise RuntimeError("jammed")

        handler.register("broken", broken, [])
        response = handler.execute({"command": "broken"})
        assert response["success"] is False
        assert response["message"] == "Error: jammed"

    def test_pay_station_commands(self):
        """Test the single-command entry point."""
        station = ParkingPayStation()
        response = pay_station_commands(
            {"command": "add_payment", "data": {"coin": 10}}, station
        )
        assert response["success"] is True
        assert station.read_display() == 4
