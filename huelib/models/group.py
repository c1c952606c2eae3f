"""Group resource, its creator and modifiers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from typing_extensions import Self

from ..api.requests import GroupCreatePayload
from .light import LIGHT_STATE_FIELDS, LightState, LightStateSetters
from .modifier import FieldSpec, Modifier, field_table

GROUP_ATTRIBUTE_FIELDS = field_table(
    FieldSpec("name"),
    FieldSpec("lights"),
    FieldSpec("class"),
)

GROUP_STATE_FIELDS = {**LIGHT_STATE_FIELDS, **field_table(FieldSpec("scene"))}


@dataclass(frozen=True)
class GroupState:
    """Aggregated on state of the lights in a group."""

    all_on: bool
    any_on: bool

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> GroupState:
        return cls(all_on=data["all_on"], any_on=data["any_on"])


@dataclass(frozen=True)
class Group:
    """A group of lights."""

    name: str
    type: str
    lights: tuple[str, ...] = ()
    id: str = ""
    class_: str | None = None
    state: GroupState | None = None
    action: LightState | None = None
    sensors: tuple[str, ...] = ()
    recycle: bool | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Group:
        """Create from a group object of the groups endpoint."""
        state = data.get("state")
        action = data.get("action")
        return cls(
            name=data["name"],
            type=data["type"],
            lights=tuple(data.get("lights", ())),
            class_=data.get("class"),
            state=GroupState.from_api(state) if state else None,
            action=LightState.from_api(action) if action else None,
            sensors=tuple(data.get("sensors", ())),
            recycle=data.get("recycle"),
        )

    def with_id(self, resource_id: str) -> Group:
        return replace(self, id=resource_id)


@dataclass(frozen=True)
class GroupCreator:
    """Body of a request creating a group."""

    name: str
    lights: tuple[str, ...] = field(default_factory=tuple)
    type: str | None = None  # LightGroup, Room, Zone, Entertainment
    class_: str | None = None  # Room class, only for rooms and zones

    def to_api_payload(self) -> GroupCreatePayload:
        payload: GroupCreatePayload = {"name": self.name, "lights": list(self.lights)}
        if self.type is not None:
            payload["type"] = self.type
        if self.class_ is not None:
            payload["class"] = self.class_
        return payload


class GroupAttributeModifier(Modifier):
    """Modifies attributes of a group."""

    def __init__(self) -> None:
        super().__init__(GROUP_ATTRIBUTE_FIELDS)

    def name(self, value: str) -> Self:
        return self.override("name", value)

    def lights(self, value: list[str]) -> Self:
        return self.override("lights", value)

    def class_(self, value: str) -> Self:
        return self.override("class", value)


class GroupStateModifier(LightStateSetters, Modifier):
    """Modifies the state of all lights in a group."""

    def __init__(self) -> None:
        super().__init__(GROUP_STATE_FIELDS)

    def scene(self, value: str) -> Self:
        """Recall the scene with the given id."""
        return self.override("scene", value)
