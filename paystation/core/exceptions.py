"""
Custom exceptions for the pay station.

Provides a hierarchy of typed exceptions for better error handling
and more informative error messages.
"""

from typing import Any, Optional


class PayStationError(Exception):
    """Base exception for all pay station errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Payment Errors
# =============================================================================


class InvalidCoinError(PayStationError):
    """A coin outside the accepted denominations was inserted."""

    def __init__(self, coin_value: Any, **kwargs: Any) -> None:
        super().__init__(f"Invalid coin: {coin_value}", **kwargs)
        self.coin_value = coin_value
        self.details["coin_value"] = coin_value
