"""Sensor resource and its modifiers.

Sensor state and config differ per sensor type (ZLLPresence, CLIPGenericFlag,
Daylight, ...), so they are kept as plain dicts.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from typing_extensions import Self

from .modifier import FieldSpec, Modifier, field_table

SENSOR_ATTRIBUTE_FIELDS = field_table(FieldSpec("name"))

SENSOR_STATE_FIELDS = field_table(
    FieldSpec("presence"),
    FieldSpec("flag"),
    FieldSpec("status"),
)

SENSOR_CONFIG_FIELDS = field_table(
    FieldSpec("on"),
    FieldSpec("reachable"),
    FieldSpec("battery"),
    FieldSpec("url"),
    FieldSpec("alert"),
    FieldSpec("ledindication"),
    FieldSpec("usertest"),
    FieldSpec("sensitivity"),
    FieldSpec("tholddark"),
    FieldSpec("tholdoffset"),
    FieldSpec("sunriseoffset"),
    FieldSpec("sunsetoffset"),
    FieldSpec("lat"),
    FieldSpec("long"),
)


@dataclass(frozen=True)
class Sensor:
    """A sensor connected to the bridge, physical or CLIP."""

    name: str
    type: str
    id: str = ""
    model_id: str | None = None
    manufacturer_name: str | None = None
    unique_id: str | None = None
    software_version: str | None = None
    state: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)
    recycle: bool | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Sensor:
        return cls(
            name=data["name"],
            type=data["type"],
            model_id=data.get("modelid"),
            manufacturer_name=data.get("manufacturername"),
            unique_id=data.get("uniqueid"),
            software_version=data.get("swversion"),
            state=dict(data.get("state", {})),
            config=dict(data.get("config", {})),
            recycle=data.get("recycle"),
        )

    def with_id(self, resource_id: str) -> Sensor:
        return replace(self, id=resource_id)


class SensorAttributeModifier(Modifier):
    """Modifies attributes of a sensor."""

    def __init__(self) -> None:
        super().__init__(SENSOR_ATTRIBUTE_FIELDS)

    def name(self, value: str) -> Self:
        return self.override("name", value)


class SensorStateModifier(Modifier):
    """Modifies the state of a CLIP sensor."""

    def __init__(self) -> None:
        super().__init__(SENSOR_STATE_FIELDS)

    def presence(self, value: bool) -> Self:
        return self.override("presence", value)

    def flag(self, value: bool) -> Self:
        return self.override("flag", value)

    def status(self, value: int) -> Self:
        return self.override("status", value)


class SensorConfigModifier(Modifier):
    """Modifies the configuration of a sensor."""

    def __init__(self) -> None:
        super().__init__(SENSOR_CONFIG_FIELDS)

    def on(self, value: bool) -> Self:
        return self.override("on", value)

    def reachable(self, value: bool) -> Self:
        return self.override("reachable", value)

    def battery(self, value: int) -> Self:
        return self.override("battery", value)

    def url(self, value: str) -> Self:
        return self.override("url", value)

    def alert(self, value: Any) -> Self:
        return self.override("alert", value)

    def led_indication(self, value: bool) -> Self:
        return self.override("ledindication", value)

    def user_test(self, value: bool) -> Self:
        return self.override("usertest", value)

    def sensitivity(self, value: int) -> Self:
        return self.override("sensitivity", value)

    def threshold_dark(self, value: int) -> Self:
        return self.override("tholddark", value)

    def threshold_offset(self, value: int) -> Self:
        return self.override("tholdoffset", value)

    def sunrise_offset(self, value: int) -> Self:
        """Minutes relative to sunrise, used by the Daylight sensor."""
        return self.override("sunriseoffset", value)

    def sunset_offset(self, value: int) -> Self:
        """Minutes relative to sunset, used by the Daylight sensor."""
        return self.override("sunsetoffset", value)

    def latitude(self, value: str) -> Self:
        return self.override("lat", value)

    def longitude(self, value: str) -> Self:
        return self.override("long", value)
