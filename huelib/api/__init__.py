"""Hue bridge REST API client package."""
from __future__ import annotations

from .exceptions import (
    HueApiError,
    HueBridgeError,
    HueConnectionError,
    HueMissingIdError,
    HueMissingUsernameError,
    HueParseError,
    HueUnsupportedOperationError,
)
from .const import (
    DISCOVERY_URL,
    ERROR_DEVICE_OFF,
    ERROR_INTERNAL,
    ERROR_INVALID_JSON,
    ERROR_INVALID_VALUE,
    ERROR_LINK_BUTTON_NOT_PRESSED,
    ERROR_METHOD_NOT_AVAILABLE,
    ERROR_MISSING_PARAMETERS,
    ERROR_PARAMETER_NOT_AVAILABLE,
    ERROR_PARAMETER_NOT_MODIFIABLE,
    ERROR_RESOURCE_NOT_AVAILABLE,
    ERROR_TOO_MANY_ITEMS,
    ERROR_UNAUTHORIZED_USER,
)
from .responses import (
    Failure,
    MixedResponse,
    Outcome,
    Success,
    decode_collection,
    decode_resource,
    is_bulk_response,
    iter_outcomes,
)
from .transport import BridgeTransport
from .client import HueBridge, discover, register_user

__all__ = [
    # Client
    "HueBridge",
    "BridgeTransport",
    "discover",
    "register_user",
    # Responses
    "Success",
    "Failure",
    "Outcome",
    "MixedResponse",
    "iter_outcomes",
    "is_bulk_response",
    "decode_resource",
    "decode_collection",
    # Exceptions
    "HueApiError",
    "HueBridgeError",
    "HueConnectionError",
    "HueMissingIdError",
    "HueMissingUsernameError",
    "HueParseError",
    "HueUnsupportedOperationError",
    # Constants - API
    "DISCOVERY_URL",
    # Constants - Bridge error codes
    "ERROR_UNAUTHORIZED_USER",
    "ERROR_INVALID_JSON",
    "ERROR_RESOURCE_NOT_AVAILABLE",
    "ERROR_METHOD_NOT_AVAILABLE",
    "ERROR_MISSING_PARAMETERS",
    "ERROR_PARAMETER_NOT_AVAILABLE",
    "ERROR_INVALID_VALUE",
    "ERROR_PARAMETER_NOT_MODIFIABLE",
    "ERROR_TOO_MANY_ITEMS",
    "ERROR_LINK_BUTTON_NOT_PRESSED",
    "ERROR_DEVICE_OFF",
    "ERROR_INTERNAL",
]
