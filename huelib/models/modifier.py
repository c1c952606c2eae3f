"""Modifiers: partial updates compiled into bridge request bodies.

A modifier collects field operations and serializes them into the flat JSON
object a PUT endpoint expects. Each resource binds a static table of the
fields it accepts; the table also says which fields the bridge can change by
a delta, and under which wire name.

    LightStateModifier().brightness(ModifierType.INCREMENT, 40).on(True)
    -> {"bri_inc": 40, "on": True}

Values are passed through unchanged. The bridge validates ranges and reports
out-of-range values as error entries.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from typing_extensions import Self

from ..api.exceptions import HueUnsupportedOperationError


class ModifierType(Enum):
    """How a single-valued field is changed."""

    OVERRIDE = "override"
    INCREMENT = "increment"
    DECREMENT = "decrement"


class CoordinateModifierType(Enum):
    """How a coordinate pair is changed."""

    OVERRIDE = "override"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    # Add to the first coordinate, subtract from the second
    INCREMENT_DECREMENT = "increment_decrement"
    # Subtract from the first coordinate, add to the second
    DECREMENT_INCREMENT = "decrement_increment"


_COORDINATE_SIGNS: dict[CoordinateModifierType, tuple[int, int]] = {
    CoordinateModifierType.INCREMENT: (1, 1),
    CoordinateModifierType.DECREMENT: (-1, -1),
    CoordinateModifierType.INCREMENT_DECREMENT: (1, -1),
    CoordinateModifierType.DECREMENT_INCREMENT: (-1, 1),
}


@dataclass(frozen=True)
class FieldSpec:
    """One field a modifier accepts."""

    wire_name: str
    # Name of the bridge's delta field, None if the bridge has no delta support
    increment_name: str | None = None
    coordinates: bool = False


def field_table(*specs: FieldSpec) -> dict[str, FieldSpec]:
    """Index field specs by wire name."""
    return {spec.wire_name: spec for spec in specs}


def to_wire(value: Any) -> Any:
    """Convert a value to its JSON-serializable wire form."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_api_payload"):
        return value.to_api_payload()
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items()}
    return value


class Modifier:
    """Accumulates field operations for one partial update."""

    def __init__(self, fields: Mapping[str, FieldSpec]) -> None:
        self._fields = fields
        # field -> (wire name, wire value)
        self._operations: dict[str, tuple[str, Any]] = {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Modifier):
            return NotImplemented
        return type(self) is type(other) and self.operations == other.operations

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.operations!r})"

    def _spec(self, field: str, operation: str) -> FieldSpec:
        try:
            return self._fields[field]
        except KeyError:
            raise HueUnsupportedOperationError(field, operation) from None

    def override(self, field: str, value: Any) -> Self:
        """Set a field to a value.

        A coordinate field takes both components as one (x, y) pair.
        """
        spec = self._spec(field, ModifierType.OVERRIDE.value)
        if spec.coordinates:
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise HueUnsupportedOperationError(field, "override without an (x, y) pair")
            x, y = value
            return self.coordinates(field, CoordinateModifierType.OVERRIDE, x, y)
        self._operations[field] = (spec.wire_name, to_wire(value))
        return self

    def increment(self, field: str, value: Any) -> Self:
        """Add a value to a field on the bridge."""
        return self.modify(field, ModifierType.INCREMENT, value)

    def decrement(self, field: str, value: Any) -> Self:
        """Subtract a value from a field on the bridge."""
        return self.modify(field, ModifierType.DECREMENT, value)

    def modify(self, field: str, modifier_type: ModifierType, value: Any) -> Self:
        """Apply an operation of the given type to a single-valued field."""
        if modifier_type is ModifierType.OVERRIDE:
            return self.override(field, value)

        spec = self._spec(field, modifier_type.value)
        if spec.coordinates or spec.increment_name is None:
            raise HueUnsupportedOperationError(field, modifier_type.value)
        delta = value if modifier_type is ModifierType.INCREMENT else -value
        self._operations[field] = (spec.increment_name, delta)
        return self

    def coordinates(
        self,
        field: str,
        modifier_type: CoordinateModifierType,
        x: float,
        y: float,
    ) -> Self:
        """Apply an operation to both components of a coordinate field."""
        spec = self._spec(field, modifier_type.value)
        if not spec.coordinates:
            raise HueUnsupportedOperationError(field, f"coordinate {modifier_type.value}")

        if modifier_type is CoordinateModifierType.OVERRIDE:
            self._operations[field] = (spec.wire_name, [x, y])
            return self

        if spec.increment_name is None:
            raise HueUnsupportedOperationError(field, modifier_type.value)
        sign_x, sign_y = _COORDINATE_SIGNS[modifier_type]
        self._operations[field] = (spec.increment_name, [sign_x * x, sign_y * y])
        return self

    def is_empty(self) -> bool:
        """Whether the modifier would not change anything."""
        return not self._operations

    @property
    def operations(self) -> dict[str, Any]:
        """Pending wire values keyed by wire name."""
        return dict(self._operations.values())

    def to_api_payload(self) -> dict[str, Any]:
        """Serialize to the body of a PUT request."""
        return self.operations
