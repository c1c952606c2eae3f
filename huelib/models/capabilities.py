from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Capability:
    """How many resources of one kind the bridge can still hold."""

    available: int
    total: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Capability:
        return cls(available=data["available"], total=data.get("total"))


@dataclass(frozen=True)
class Capabilities:
    lights: Capability
    sensors: Capability
    groups: Capability
    scenes: Capability
    schedules: Capability
    rules: Capability
    resourcelinks: Capability
    timezones: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Capabilities:
        return cls(
            lights=Capability.from_api(data["lights"]),
            sensors=Capability.from_api(data["sensors"]),
            groups=Capability.from_api(data["groups"]),
            scenes=Capability.from_api(data["scenes"]),
            schedules=Capability.from_api(data["schedules"]),
            rules=Capability.from_api(data["rules"]),
            resourcelinks=Capability.from_api(data["resourcelinks"]),
            timezones=tuple(data.get("timezones", {}).get("values", ())),
        )
