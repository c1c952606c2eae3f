"""Types shared by several resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from ..api.const import LAST_SCAN_ACTIVE, LAST_SCAN_FORMAT, LAST_SCAN_NONE
from ..api.requests import ActionPayload


class Alert(Enum):
    """Alert effect of a light."""

    SELECT = "select"  # one breathe cycle
    LSELECT = "lselect"  # breathe cycles for 15 seconds
    NONE = "none"


class Effect(Enum):
    """Dynamic effect of a light."""

    COLORLOOP = "colorloop"
    NONE = "none"


class ColorMode(Enum):
    """Color mode of a light."""

    COLOR_TEMPERATURE = "ct"
    HUE_AND_SATURATION = "hs"
    COLOR_SPACE_COORDINATES = "xy"


class ActionRequestType(Enum):
    """HTTP method of a schedule or rule action."""

    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Action:
    """Request the bridge sends when a schedule or rule fires."""

    address: str
    request_type: ActionRequestType
    body: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Action:
        return cls(
            address=data["address"],
            request_type=ActionRequestType(data["method"]),
            body=dict(data.get("body", {})),
        )

    def to_api_payload(self) -> ActionPayload:
        return {
            "address": self.address,
            "method": self.request_type.value,
            "body": self.body,
        }


class LastScanKind(Enum):
    """State of the last search for new resources."""

    DATETIME = "datetime"
    ACTIVE = "active"
    NONE = "none"  # no search since the bridge was powered on


@dataclass(frozen=True)
class LastScan:
    """When the bridge last searched for new resources."""

    kind: LastScanKind
    at: datetime | None = None

    @classmethod
    def from_api(cls, value: str) -> LastScan:
        if value == LAST_SCAN_ACTIVE:
            return cls(kind=LastScanKind.ACTIVE)
        if value == LAST_SCAN_NONE:
            return cls(kind=LastScanKind.NONE)
        return cls(
            kind=LastScanKind.DATETIME,
            at=datetime.strptime(value, LAST_SCAN_FORMAT),
        )


@dataclass(frozen=True)
class ScanResource:
    """Resource found by a search."""

    id: str
    name: str


@dataclass(frozen=True)
class Scan:
    """Result of a search for new lights or sensors.

    The bridge returns found resources keyed by id next to a "lastscan" key:
    {"7": {"name": "Hue Lamp 7"}, "lastscan": "2012-10-29T12:00:00"}
    """

    last_scan: LastScan
    resources: tuple[ScanResource, ...] = ()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Scan:
        resources = []
        for key, value in data.items():
            if key == "lastscan":
                continue
            name = value["name"] if isinstance(value, dict) else str(value)
            resources.append(ScanResource(id=key, name=name))
        return cls(last_scan=LastScan.from_api(data["lastscan"]), resources=tuple(resources))


@dataclass(frozen=True)
class User:
    """User registered on a bridge."""

    name: str
    client_key: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> User:
        return cls(name=data["username"], client_key=data.get("clientkey"))
