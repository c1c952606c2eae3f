"""Async client for the Philips Hue bridge REST API."""
from __future__ import annotations

from .api import (
    HueApiError,
    HueBridge,
    HueBridgeError,
    MixedResponse,
    discover,
    register_user,
)

__version__ = "0.1.0"

__all__ = [
    "HueApiError",
    "HueBridge",
    "HueBridgeError",
    "MixedResponse",
    "discover",
    "register_user",
]
