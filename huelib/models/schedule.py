"""Schedule resource, its creator and modifier."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from typing_extensions import Self

from ..api.requests import ScheduleCreatePayload
from .common import Action
from .modifier import FieldSpec, Modifier, field_table

SCHEDULE_FIELDS = field_table(
    FieldSpec("name"),
    FieldSpec("description"),
    FieldSpec("command"),
    FieldSpec("localtime"),
    FieldSpec("status"),
    FieldSpec("autodelete"),
)


@dataclass(frozen=True)
class Schedule:
    """A timed action of the bridge."""

    name: str
    command: Action
    localtime: str
    id: str = ""
    description: str | None = None
    start_time: str | None = None
    status: str | None = None  # enabled or disabled
    autodelete: bool | None = None
    recycle: bool | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Schedule:
        return cls(
            name=data["name"],
            command=Action.from_api(data["command"]),
            localtime=data["localtime"],
            description=data.get("description"),
            start_time=data.get("starttime"),
            status=data.get("status"),
            autodelete=data.get("autodelete"),
            recycle=data.get("recycle"),
        )

    def with_id(self, resource_id: str) -> Schedule:
        return replace(self, id=resource_id)


@dataclass(frozen=True)
class ScheduleCreator:
    """Body of a request creating a schedule.

    localtime uses the bridge's time pattern format, e.g.
    "W124/T06:00:00" (weekdays at 6am) or "PT00:10:00" (timer, 10 minutes).
    """

    command: Action
    localtime: str
    name: str | None = None
    description: str | None = None
    status: str | None = None
    autodelete: bool | None = None
    recycle: bool | None = None

    def to_api_payload(self) -> ScheduleCreatePayload:
        payload: ScheduleCreatePayload = {
            "command": self.command.to_api_payload(),
            "localtime": self.localtime,
        }
        optional = {
            "name": self.name,
            "description": self.description,
            "status": self.status,
            "autodelete": self.autodelete,
            "recycle": self.recycle,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


class ScheduleModifier(Modifier):
    """Modifies attributes of a schedule."""

    def __init__(self) -> None:
        super().__init__(SCHEDULE_FIELDS)

    def name(self, value: str) -> Self:
        return self.override("name", value)

    def description(self, value: str) -> Self:
        return self.override("description", value)

    def command(self, value: Action) -> Self:
        return self.override("command", value)

    def localtime(self, value: str) -> Self:
        return self.override("localtime", value)

    def status(self, value: str) -> Self:
        return self.override("status", value)

    def autodelete(self, value: bool) -> Self:
        return self.override("autodelete", value)
