"""Light resource and its modifiers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from typing_extensions import Self

from .common import Alert, ColorMode, Effect
from .modifier import CoordinateModifierType, FieldSpec, Modifier, ModifierType, field_table

LIGHT_ATTRIBUTE_FIELDS = field_table(FieldSpec("name"))

LIGHT_STATE_FIELDS = field_table(
    FieldSpec("on"),
    FieldSpec("bri", increment_name="bri_inc"),
    FieldSpec("hue", increment_name="hue_inc"),
    FieldSpec("sat", increment_name="sat_inc"),
    FieldSpec("xy", increment_name="xy_inc", coordinates=True),
    FieldSpec("ct", increment_name="ct_inc"),
    FieldSpec("alert"),
    FieldSpec("effect"),
    FieldSpec("transitiontime"),
)


@dataclass(frozen=True)
class LightState:
    """Current state of a light, or the last action sent to a group."""

    on: bool | None = None
    brightness: int | None = None
    hue: int | None = None
    saturation: int | None = None
    color_space_coordinates: tuple[float, float] | None = None
    color_temperature: int | None = None
    alert: Alert | None = None
    effect: Effect | None = None
    color_mode: ColorMode | None = None
    reachable: bool | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> LightState:
        xy = data.get("xy")
        alert = data.get("alert")
        effect = data.get("effect")
        color_mode = data.get("colormode")
        return cls(
            on=data.get("on"),
            brightness=data.get("bri"),
            hue=data.get("hue"),
            saturation=data.get("sat"),
            color_space_coordinates=(xy[0], xy[1]) if xy else None,
            color_temperature=data.get("ct"),
            alert=Alert(alert) if alert else None,
            effect=Effect(effect) if effect else None,
            color_mode=ColorMode(color_mode) if color_mode else None,
            reachable=data.get("reachable"),
        )


@dataclass(frozen=True)
class Light:
    """A light connected to the bridge."""

    name: str
    type: str
    state: LightState
    id: str = ""
    model_id: str | None = None
    unique_id: str | None = None
    manufacturer_name: str | None = None
    product_name: str | None = None
    software_version: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Light:
        """Create from a light object of the lights endpoint."""
        return cls(
            name=data["name"],
            type=data["type"],
            state=LightState.from_api(data["state"]),
            model_id=data.get("modelid"),
            unique_id=data.get("uniqueid"),
            manufacturer_name=data.get("manufacturername"),
            product_name=data.get("productname"),
            software_version=data.get("swversion"),
        )

    def with_id(self, resource_id: str) -> Light:
        return replace(self, id=resource_id)


class LightAttributeModifier(Modifier):
    """Modifies attributes of a light."""

    def __init__(self) -> None:
        super().__init__(LIGHT_ATTRIBUTE_FIELDS)

    def name(self, value: str) -> Self:
        return self.override("name", value)


class LightStateSetters:
    """Named setters shared by the light state and group action modifiers."""

    def on(self, value: bool) -> Self:
        return self.override("on", value)

    def brightness(self, modifier_type: ModifierType, value: int) -> Self:
        return self.modify("bri", modifier_type, value)

    def hue(self, modifier_type: ModifierType, value: int) -> Self:
        return self.modify("hue", modifier_type, value)

    def saturation(self, modifier_type: ModifierType, value: int) -> Self:
        return self.modify("sat", modifier_type, value)

    def color_space_coordinates(
        self, modifier_type: CoordinateModifierType, x: float, y: float
    ) -> Self:
        return self.coordinates("xy", modifier_type, x, y)

    def color_temperature(self, modifier_type: ModifierType, value: int) -> Self:
        return self.modify("ct", modifier_type, value)

    def alert(self, value: Alert) -> Self:
        return self.override("alert", value)

    def effect(self, value: Effect) -> Self:
        return self.override("effect", value)

    def transition_time(self, value: int) -> Self:
        """Duration of the transition in multiples of 100ms."""
        return self.override("transitiontime", value)


class LightStateModifier(LightStateSetters, Modifier):
    """Modifies the state of a light."""

    def __init__(self) -> None:
        super().__init__(LIGHT_STATE_FIELDS)
