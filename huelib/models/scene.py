from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from typing_extensions import Self

from ..api.requests import SceneCreatePayload
from .modifier import FieldSpec, Modifier, field_table

SCENE_FIELDS = field_table(
    FieldSpec("name"),
    FieldSpec("lights"),
    FieldSpec("storelightstate"),
)


@dataclass(frozen=True)
class Scene:
    name: str
    lights: tuple[str, ...] = ()
    id: str = ""
    type: str | None = None  # LightScene or GroupScene
    group: str | None = None
    owner: str | None = None
    recycle: bool | None = None
    locked: bool | None = None
    app_data: dict[str, Any] = field(default_factory=dict)
    picture: str | None = None
    last_updated: str | None = None
    version: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Scene:
        return cls(
            name=data["name"],
            lights=tuple(data.get("lights", ())),
            type=data.get("type"),
            group=data.get("group"),
            owner=data.get("owner"),
            recycle=data.get("recycle"),
            locked=data.get("locked"),
            app_data=dict(data.get("appdata", {})),
            picture=data.get("picture"),
            last_updated=data.get("lastupdated"),
            version=data.get("version"),
        )

    def with_id(self, resource_id: str) -> Scene:
        return replace(self, id=resource_id)


@dataclass(frozen=True)
class SceneCreator:
    name: str
    lights: tuple[str, ...] = field(default_factory=tuple)
    recycle: bool | None = None
    transition_time: int | None = None
    app_data: dict[str, Any] | None = None
    picture: str | None = None
    # Set for GroupScenes, whose lights are taken from the group
    group: str | None = None
    type: str | None = None

    def to_api_payload(self) -> SceneCreatePayload:
        payload: SceneCreatePayload = {"name": self.name}
        if self.lights:
            payload["lights"] = list(self.lights)
        optional = {
            "recycle": self.recycle,
            "transitiontime": self.transition_time,
            "appdata": self.app_data,
            "picture": self.picture,
            "group": self.group,
            "type": self.type,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


class SceneModifier(Modifier):
    """Modifies attributes of a scene."""

    def __init__(self) -> None:
        super().__init__(SCENE_FIELDS)

    def name(self, value: str) -> Self:
        return self.override("name", value)

    def lights(self, value: list[str]) -> Self:
        return self.override("lights", value)

    def store_light_state(self, value: bool) -> Self:
        """Store the current state of the scene's lights in the scene."""
        return self.override("storelightstate", value)
