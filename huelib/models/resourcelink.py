from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from typing_extensions import Self

from ..api.requests import ResourcelinkCreatePayload
from .modifier import FieldSpec, Modifier, field_table

RESOURCELINK_FIELDS = field_table(
    FieldSpec("name"),
    FieldSpec("description"),
    FieldSpec("classid"),
    FieldSpec("links"),
)


@dataclass(frozen=True)
class Resourcelink:
    """Groups bridge resources that belong together, e.g. for one app feature."""

    name: str
    class_id: int
    links: tuple[str, ...] = ()
    id: str = ""
    description: str | None = None
    type: str | None = None
    owner: str | None = None
    recycle: bool | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Resourcelink:
        return cls(
            name=data["name"],
            class_id=data["classid"],
            links=tuple(data.get("links", ())),
            description=data.get("description"),
            type=data.get("type"),
            owner=data.get("owner"),
            recycle=data.get("recycle"),
        )

    def with_id(self, resource_id: str) -> Resourcelink:
        return replace(self, id=resource_id)


@dataclass(frozen=True)
class ResourcelinkCreator:
    name: str
    class_id: int
    links: tuple[str, ...] = field(default_factory=tuple)
    description: str | None = None
    recycle: bool | None = None

    def to_api_payload(self) -> ResourcelinkCreatePayload:
        payload: ResourcelinkCreatePayload = {
            "name": self.name,
            "classid": self.class_id,
            "links": list(self.links),
        }
        if self.description is not None:
            payload["description"] = self.description
        if self.recycle is not None:
            payload["recycle"] = self.recycle
        return payload


class ResourcelinkModifier(Modifier):
    """Modifies attributes of a resourcelink."""

    def __init__(self) -> None:
        super().__init__(RESOURCELINK_FIELDS)

    def name(self, value: str) -> Self:
        return self.override("name", value)

    def description(self, value: str) -> Self:
        return self.override("description", value)

    def class_id(self, value: int) -> Self:
        return self.override("classid", value)

    def links(self, value: list[str]) -> Self:
        return self.override("links", value)
