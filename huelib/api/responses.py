"""Interpretation of Hue bridge responses.

The bridge answers write requests with a JSON array of single-key objects:

    [{"success": {"/lights/1/state/bri": 200}},
     {"error": {"type": 7, "address": "/lights/1/state/hue", "description": "..."}}]

Read requests usually return the resource itself, but some failures (an
unauthorized user, an unknown id) come back in the array form above. Every
decoder here first checks for the array form and only then decodes the raw
value as the requested type.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, TypedDict, TypeVar, Union

from typing_extensions import NotRequired

from .const import CREATED_ID_PATH, RESPONSE_ERROR, RESPONSE_SUCCESS
from .exceptions import HueBridgeError, HueMissingIdError, HueParseError

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

# Exceptions a model factory raises when a body lacks a key or has a bad value
_MODEL_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


class ErrorDict(TypedDict):
    type: int | str
    address: str
    description: str


class ErrorEntryDict(TypedDict):
    error: ErrorDict


class SuccessEntryDict(TypedDict):
    # Maps a resource path ("/lights/1/state/bri") or a key ("id") to its
    # value, or a plain message for DELETE
    success: dict[str, Any] | str


class DiscoveredBridgeDict(TypedDict):
    id: str
    internalipaddress: str
    port: NotRequired[int]


class RegisteredUserDict(TypedDict):
    username: str
    clientkey: NotRequired[str]


@dataclass(frozen=True)
class Success:
    """A field accepted by the bridge, or a value assigned by it."""

    path: str
    value: Any

    def __str__(self) -> str:
        return f"{self.path} = {self.value}"


@dataclass(frozen=True)
class Failure:
    """An error entry reported by the bridge."""

    description: str
    address: str
    error_type: int | None = None

    def __str__(self) -> str:
        return f"{self.address}: {self.description}"


Outcome = Union[Success, Failure]


def _is_bulk_entry(entry: Any) -> bool:
    if not isinstance(entry, dict) or len(entry) != 1:
        return False
    key, value = next(iter(entry.items()))
    if key == RESPONSE_SUCCESS:
        return True
    if key == RESPONSE_ERROR:
        return (
            isinstance(value, dict)
            and isinstance(value.get("description"), str)
            and isinstance(value.get("address"), str)
        )
    return False


def is_bulk_response(raw: Any) -> bool:
    """Return True if raw has the shape of a bulk success/error array."""
    return isinstance(raw, list) and all(_is_bulk_entry(entry) for entry in raw)


def _decode_error_type(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise HueParseError(f"Invalid bridge error type: {value!r}")


def _decode_failure(error: dict[str, Any]) -> Failure:
    error_type = _decode_error_type(error.get("type"))
    failure = Failure(
        description=error["description"],
        address=error["address"],
        error_type=error_type,
    )
    _LOGGER.debug("Bridge reported error %s: %s", failure.error_type, failure)
    return failure


def iter_outcomes(raw: Any) -> Iterator[Outcome]:
    """Yield the outcomes of a bulk response in response order.

    Every array element yields at least one outcome. A success entry yields
    one Success per path/value pair, or one Success with an empty path for a
    bare message or an empty object. An error entry yields one Failure.
    Decoding is lazy, so a consumer that stops at the first Failure never
    decodes the rest of the array.

    Raises:
        HueParseError: raw is not an array or holds a malformed entry.
    """
    if not isinstance(raw, list):
        raise HueParseError(f"Expected a bulk response array, got {type(raw).__name__}")

    for index, entry in enumerate(raw):
        if not _is_bulk_entry(entry):
            raise HueParseError(f"Malformed bulk response entry at index {index}: {entry!r}")
        if RESPONSE_SUCCESS in entry:
            payload = entry[RESPONSE_SUCCESS]
            if isinstance(payload, dict) and payload:
                for path, value in payload.items():
                    yield Success(path=path, value=value)
            else:
                # DELETE answers with a message: {"success": "/lights/1 deleted"}.
                # An empty object still counts as one outcome.
                yield Success(path="", value=payload)
        else:
            yield _decode_failure(entry[RESPONSE_ERROR])


def raise_for_failure(raw: Any) -> None:
    """Raise HueBridgeError for the first Failure in a bulk response."""
    for outcome in iter_outcomes(raw):
        if isinstance(outcome, Failure):
            raise HueBridgeError.from_failure(outcome)


@dataclass(frozen=True)
class MixedResponse:
    """Outcomes of one write request, successes and failures interleaved."""

    outcomes: tuple[Outcome, ...] = ()

    @classmethod
    def from_api(cls, raw: Any) -> MixedResponse:
        """Decode a bulk response.

        Raises:
            HueParseError: raw is not a bulk response.
        """
        return cls(outcomes=tuple(iter_outcomes(raw)))

    def __iter__(self) -> Iterator[Outcome]:
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __bool__(self) -> bool:
        return bool(self.outcomes)

    def __getitem__(self, index: int) -> Outcome:
        return self.outcomes[index]

    @property
    def successes(self) -> list[Success]:
        """Successful outcomes in response order."""
        return [o for o in self.outcomes if isinstance(o, Success)]

    @property
    def failures(self) -> list[Failure]:
        """Failed outcomes in response order."""
        return [o for o in self.outcomes if isinstance(o, Failure)]

    def into_result(self) -> None:
        """Collapse into a single result.

        Raises:
            HueBridgeError: carrying the first Failure, if any.
        """
        for outcome in self.outcomes:
            if isinstance(outcome, Failure):
                raise HueBridgeError.from_failure(outcome)


def decode_resource(raw: Any, factory: Callable[[Any], T]) -> T:
    """Decode a read response into a model.

    Raises:
        HueBridgeError: the bridge answered with an error entry.
        HueParseError: the body does not match what factory expects.
    """
    if is_bulk_response(raw):
        raise_for_failure(raw)
    try:
        return factory(raw)
    except _MODEL_ERRORS as err:
        raise HueParseError(f"Unexpected response shape: {err}") from err


def decode_collection(raw: Any, factory: Callable[[Any], T]) -> list[tuple[str, T]]:
    """Decode a get-all response into (identifier, model) pairs.

    The identifiers are the keys of the response object. They are returned
    alongside the models and are not part of the bodies.
    """
    if is_bulk_response(raw):
        raise_for_failure(raw)
    if not isinstance(raw, dict):
        raise HueParseError(f"Expected an object keyed by id, got {type(raw).__name__}")
    try:
        return [(resource_id, factory(body)) for resource_id, body in raw.items()]
    except _MODEL_ERRORS as err:
        raise HueParseError(f"Unexpected response shape: {err}") from err


def created_id(raw: Any, resource: str) -> str:
    """Return the identifier assigned by a creation endpoint.

    Raises:
        HueBridgeError: the response holds an error entry.
        HueMissingIdError: no success entry carries an id.
    """
    resource_id: str | None = None
    for outcome in iter_outcomes(raw):
        if isinstance(outcome, Failure):
            raise HueBridgeError.from_failure(outcome)
        if resource_id is None and outcome.path == CREATED_ID_PATH:
            resource_id = str(outcome.value)
    if resource_id is None:
        raise HueMissingIdError(resource)
    return resource_id
