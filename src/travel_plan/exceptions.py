"""Custom exceptions for the travel plan manager."""

from typing import Optional


class TravelPlanError(Exception):
    """Base exception for all travel plan errors."""

    default_user_message = "The operation could not be completed."

    def __init__(self, message: str, user_message: Optional[str] = None):
        self.message = message
        self._user_message = user_message
        super().__init__(message)

    @property
    def user_message(self) -> str:
        """Message safe to show at the prompt."""
        return self._user_message or self.default_user_message


class StoreWriteError(TravelPlanError):
    """Raised when the trip document cannot be written."""

    default_user_message = "Could not save trips to disk."


class StoreCorruptedError(TravelPlanError):
    """Raised in strict mode when the trip document cannot be parsed."""

    default_user_message = "The saved trip file is corrupted and was not loaded."


class InvalidFareError(TravelPlanError):
    """Raised when fare input is not an unsigned integer."""

    default_user_message = "Fare must be a whole number of 0 or more."


class TripNotFoundError(TravelPlanError):
    """Raised when a trip position no longer exists in the collection."""

    default_user_message = "That trip no longer exists."
