from __future__ import annotations

from typing import Any, TypedDict

from typing_extensions import NotRequired


class RegisterUserPayload(TypedDict):
    # POST /api
    devicetype: str
    generateclientkey: NotRequired[bool]


class SearchPayload(TypedDict):
    # POST /lights or POST /sensors, without body to search everything
    deviceid: list[str]


class ActionPayload(TypedDict):
    address: str
    method: str
    body: dict[str, Any]


class ConditionPayload(TypedDict):
    address: str
    operator: str
    value: NotRequired[str]


# POST /groups, "class" is a keyword so the functional form is needed
GroupCreatePayload = TypedDict(
    "GroupCreatePayload",
    {
        "name": str,
        "lights": list[str],
        "type": NotRequired[str],
        "class": NotRequired[str],
    },
)


class SceneCreatePayload(TypedDict):
    # POST /scenes
    name: str
    lights: NotRequired[list[str]]
    group: NotRequired[str]
    type: NotRequired[str]
    recycle: NotRequired[bool]
    transitiontime: NotRequired[int]
    appdata: NotRequired[dict[str, Any]]
    picture: NotRequired[str]


class ScheduleCreatePayload(TypedDict):
    # POST /schedules
    command: ActionPayload
    localtime: str
    name: NotRequired[str]
    description: NotRequired[str]
    status: NotRequired[str]
    autodelete: NotRequired[bool]
    recycle: NotRequired[bool]


class RuleCreatePayload(TypedDict):
    # POST /rules
    conditions: list[ConditionPayload]
    actions: list[ActionPayload]
    name: NotRequired[str]
    status: NotRequired[str]
    recycle: NotRequired[bool]


class ResourcelinkCreatePayload(TypedDict):
    # POST /resourcelinks
    name: str
    classid: int
    links: list[str]
    description: NotRequired[str]
    recycle: NotRequired[bool]
