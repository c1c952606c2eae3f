"""Protocol interfaces for the Hue bridge client."""

from .api import IBridgeTransport

__all__ = [
    "IBridgeTransport",
]
