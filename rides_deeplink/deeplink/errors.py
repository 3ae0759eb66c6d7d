# This file defines the error types raised by the deeplink core.
# Callers attaching deeplinks to a control catch MissingClientIDError and log it.
# UnrepresentableValueError signals a programming error and is left to propagate.

from __future__ import annotations


class DeeplinkError(RuntimeError):
    """Base class for deeplink construction failures."""


class MissingClientIDError(DeeplinkError):
    """Raised when a deeplink is requested without a configured client id."""


class UnrepresentableValueError(DeeplinkError, ValueError):
    """Raised when a parameter value cannot be percent-encoded."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Parameter value {value!r} cannot be percent-encoded: {reason}")
