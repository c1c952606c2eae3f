"""Exceptions for the Hue bridge client."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .responses import Failure


class HueApiError(Exception):
    """Base exception for Hue bridge errors."""

    def __init__(self, message: str, code: int | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self.code = code


class HueConnectionError(HueApiError):
    """Connection error - network issues or timeouts."""

    def __init__(self, message: str = "Failed to connect to Hue bridge") -> None:
        """Initialize connection error."""
        super().__init__(message)


class HueParseError(HueApiError):
    """Response body is not JSON or does not have the expected shape."""

    def __init__(self, message: str = "Failed to parse bridge response") -> None:
        """Initialize parse error."""
        super().__init__(message)


class HueBridgeError(HueApiError):
    """Error entry reported by the bridge for a rejected operation."""

    def __init__(
        self,
        description: str,
        address: str,
        error_type: int | None = None,
    ) -> None:
        """Initialize bridge error."""
        super().__init__(f"{address}: {description}", code=error_type)
        self.description = description
        self.address = address
        self.failure: Failure | None = None

    @property
    def error_type(self) -> int | None:
        """Numeric bridge error code."""
        return self.code

    @classmethod
    def from_failure(cls, failure: Failure) -> HueBridgeError:
        """Create from a decoded failure outcome."""
        error = cls(failure.description, failure.address, failure.error_type)
        error.failure = failure
        return error


class HueMissingIdError(HueApiError):
    """Creation response did not contain the identifier of the new resource."""

    def __init__(self, resource: str) -> None:
        """Initialize missing identifier error."""
        super().__init__(f"Bridge did not return an id for the created {resource}")
        self.resource = resource


class HueMissingUsernameError(HueApiError):
    """Registration response did not contain a username."""

    def __init__(self, message: str = "Bridge did not return a username") -> None:
        """Initialize missing username error."""
        super().__init__(message)


class HueUnsupportedOperationError(HueApiError):
    """Modifier operation is not supported by the bridge for a field."""

    def __init__(self, field: str, operation: str) -> None:
        """Initialize unsupported operation error."""
        super().__init__(f"Field {field} does not support {operation}")
        self.field = field
        self.operation = operation
