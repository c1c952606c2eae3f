"""Rule resource, its creator and modifier."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from typing_extensions import Self

from ..api.requests import ConditionPayload, RuleCreatePayload
from .common import Action
from .modifier import FieldSpec, Modifier, field_table, to_wire

RULE_FIELDS = field_table(
    FieldSpec("name"),
    FieldSpec("status"),
    FieldSpec("conditions"),
    FieldSpec("actions"),
)


@dataclass(frozen=True)
class Condition:
    """Condition of a rule, e.g. /sensors/2/state/buttonevent eq 16."""

    address: str
    operator: str  # eq, gt, lt, dx, ddx, stable, not stable, in, not in
    value: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Condition:
        return cls(
            address=data["address"],
            operator=data["operator"],
            value=data.get("value"),
        )

    def to_api_payload(self) -> ConditionPayload:
        payload: ConditionPayload = {"address": self.address, "operator": self.operator}
        if self.value is not None:
            payload["value"] = self.value
        return payload


@dataclass(frozen=True)
class Rule:
    name: str
    conditions: tuple[Condition, ...]
    actions: tuple[Action, ...]
    id: str = ""
    owner: str | None = None
    created: str | None = None
    last_triggered: str | None = None
    times_triggered: int | None = None
    status: str | None = None
    recycle: bool | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Rule:
        return cls(
            name=data["name"],
            conditions=tuple(Condition.from_api(c) for c in data["conditions"]),
            actions=tuple(Action.from_api(a) for a in data["actions"]),
            owner=data.get("owner"),
            created=data.get("created"),
            last_triggered=data.get("lasttriggered"),
            times_triggered=data.get("timestriggered"),
            status=data.get("status"),
            recycle=data.get("recycle"),
        )

    def with_id(self, resource_id: str) -> Rule:
        return replace(self, id=resource_id)


@dataclass(frozen=True)
class RuleCreator:
    conditions: tuple[Condition, ...]
    actions: tuple[Action, ...]
    name: str | None = None
    status: str | None = None
    recycle: bool | None = None

    def to_api_payload(self) -> RuleCreatePayload:
        payload: RuleCreatePayload = {
            "conditions": to_wire(self.conditions),
            "actions": to_wire(self.actions),
        }
        optional = {"name": self.name, "status": self.status, "recycle": self.recycle}
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


class RuleModifier(Modifier):
    """Modifies attributes of a rule."""

    def __init__(self) -> None:
        super().__init__(RULE_FIELDS)

    def name(self, value: str) -> Self:
        return self.override("name", value)

    def status(self, value: str) -> Self:
        return self.override("status", value)

    def conditions(self, value: list[Condition]) -> Self:
        return self.override("conditions", value)

    def actions(self, value: list[Action]) -> Self:
        return self.override("actions", value)
