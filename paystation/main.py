"""
Pay Station - Command line entry point.

Runs a sequence of steps against a fresh pay station and prints one
JSON response per step. A step is either a coin value in cents or a
command name:

    paystation 10 25 read_display buy
    echo "25 cancel 5 empty" | paystation
"""

import argparse
import json
import logging
import sys
from typing import Any, Iterable, Optional

from paystation.application.command_handler import CommandHandler
from paystation.domain.pay_station import ParkingPayStation
from paystation.loggers import logger


def step_to_command(step: str, command_id: int) -> dict[str, Any]:
    """
    Build a command dictionary from a CLI step.

    Args:
        step: Coin value in cents or command name.
        command_id: Sequence number of the step.

    Returns:
        Command dictionary accepted by CommandHandler.execute().
    """
    try:
        coin = int(step)
    except ValueError:
        return {"command": step, "command_id": command_id}
    return {"command": "add_payment", "command_id": command_id, "data": {"coin": coin}}


def run_steps(handler: CommandHandler, steps: Iterable[str]) -> list[dict[str, Any]]:
    """Execute each step in order and collect the responses."""
    return [
        handler.execute(step_to_command(step, command_id))
        for command_id, step in enumerate(steps, start=1)
    ]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="paystation",
        description="Coin-operated parking pay station",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "steps",
        nargs="*",
        help="Coin values (5, 10, 25) or commands; read from stdin when omitted",
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--list-commands",
        action="store_true",
        help="Print the available commands and exit",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the pay station CLI.

    Returns:
        0 when every step succeeded, 1 otherwise.
    """
    args = parse_args(argv)
    logger.setLevel(logging.DEBUG if args.debug else logging.INFO)

    handler = CommandHandler(ParkingPayStation())

    if args.list_commands:
        for command in handler.get_available_commands():
            print(json.dumps(command))
        return 0

    steps = args.steps or sys.stdin.read().split()
    logger.debug(f"Running {len(steps)} step(s)")

    responses = run_steps(handler, steps)
    for response in responses:
        print(json.dumps(response))

    return 0 if all(response["success"] for response in responses) else 1


if __name__ == "__main__":
    sys.exit(main())
