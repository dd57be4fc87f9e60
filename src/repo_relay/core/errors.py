"""Errors raised while relaying a single event."""

from typing import Optional


class RelayError(Exception):
    """Base class for relay failures. Always local to one event."""


class MetadataFetchError(RelayError):
    """Subject metadata could not be fetched or parsed."""


class DeliveryError(RelayError):
    """The chat webhook rejected the notification or was unreachable."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
