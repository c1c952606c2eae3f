"""Hue bridge client."""
from __future__ import annotations

import ipaddress
import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import aiohttp

from ..models.capabilities import Capabilities
from ..models.common import Scan, User
from ..models.config import Config, ConfigModifier
from ..models.group import Group, GroupAttributeModifier, GroupCreator, GroupStateModifier
from ..models.light import Light, LightAttributeModifier, LightStateModifier
from ..models.modifier import Modifier
from ..models.resourcelink import Resourcelink, ResourcelinkCreator, ResourcelinkModifier
from ..models.rule import Rule, RuleCreator, RuleModifier
from ..models.scene import Scene, SceneCreator, SceneModifier
from ..models.schedule import Schedule, ScheduleCreator, ScheduleModifier
from ..models.sensor import (
    Sensor,
    SensorAttributeModifier,
    SensorConfigModifier,
    SensorStateModifier,
)
from ..protocols.api import IBridgeTransport
from .const import (
    API_PATH,
    DISCOVERY_URL,
    ENDPOINT_CAPABILITIES,
    ENDPOINT_CONFIG,
    ENDPOINT_GROUPS,
    ENDPOINT_LIGHTS,
    ENDPOINT_RESOURCELINKS,
    ENDPOINT_RULES,
    ENDPOINT_SCENES,
    ENDPOINT_SCHEDULES,
    ENDPOINT_SENSORS,
    METHOD_DELETE,
    METHOD_GET,
    METHOD_POST,
    METHOD_PUT,
    REQUEST_TIMEOUT,
    SUFFIX_GROUP_ACTION,
    SUFFIX_LIGHT_STATE,
    SUFFIX_NEW,
    SUFFIX_SENSOR_CONFIG,
    SUFFIX_SENSOR_STATE,
)
from .exceptions import HueBridgeError, HueMissingUsernameError, HueParseError
from .requests import RegisterUserPayload, SearchPayload
from .responses import (
    DiscoveredBridgeDict,
    Failure,
    MixedResponse,
    RegisteredUserDict,
    created_id,
    decode_collection,
    decode_resource,
    iter_outcomes,
    raise_for_failure,
)
from .transport import BridgeTransport

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


async def discover(session: aiohttp.ClientSession | None = None) -> list[str]:
    """Discover bridges in the local network.

    Asks the Hue discovery service for the addresses of bridges that are
    registered from the same public IP.

    Returns:
        IP addresses of the discovered bridges

    Raises:
        HueConnectionError: Network error
        HueParseError: Unexpected response or invalid IP address
    """
    transport = BridgeTransport(DISCOVERY_URL, session=session)
    try:
        raw: list[DiscoveredBridgeDict] = await transport.send(METHOD_GET, "")
    finally:
        await transport.close()

    try:
        return [str(ipaddress.ip_address(bridge["internalipaddress"])) for bridge in raw]
    except (KeyError, TypeError, ValueError) as err:
        raise HueParseError(f"Invalid discovery response: {err}") from err


async def register_user(
    host: str,
    devicetype: str,
    generate_clientkey: bool = False,
    session: aiohttp.ClientSession | None = None,
) -> User:
    """Register a new user on a bridge.

    The link button of the bridge has to be pressed shortly before, otherwise
    the bridge answers with error 101.

    Args:
        host: IP address or host name of the bridge
        devicetype: Name of the app and device, e.g. "huelib#laptop"
        generate_clientkey: Also generate a client key for the entertainment API

    Returns:
        The registered user

    Raises:
        HueBridgeError: The bridge rejected the registration
        HueMissingUsernameError: The response did not contain a username
    """
    payload: RegisterUserPayload = {"devicetype": devicetype}
    if generate_clientkey:
        payload["generateclientkey"] = True

    transport = BridgeTransport(f"http://{host}/{API_PATH}", session=session)
    try:
        raw = await transport.send(METHOD_POST, "", payload)
    finally:
        await transport.close()

    fields: dict[str, Any] = {}
    for outcome in iter_outcomes(raw):
        if isinstance(outcome, Failure):
            raise HueBridgeError.from_failure(outcome)
        fields[outcome.path] = outcome.value

    if "username" not in fields:
        raise HueMissingUsernameError()
    registered: RegisteredUserDict = {"username": fields["username"]}
    if "clientkey" in fields:
        registered["clientkey"] = fields["clientkey"]
    return User.from_api(registered)


class HueBridge:
    """Client for the resources of one bridge, accessed as one user."""

    def __init__(
        self,
        host: str,
        username: str,
        session: aiohttp.ClientSession | None = None,
        transport: IBridgeTransport | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize bridge client.

        A transport, if given, is used as is and session and timeout are
        ignored.
        """
        self.host = host
        self.username = username
        if transport is None:
            transport = BridgeTransport(
                f"http://{host}/{API_PATH}/{username}",
                session=session,
                timeout=timeout,
            )
        self._transport = transport

    async def __aenter__(self) -> HueBridge:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the transport."""
        await self._transport.close()

    # === Request helpers ===

    async def _modify(self, path: str, modifier: Modifier) -> MixedResponse:
        """Send a modifier as PUT body, skipping the request if it is empty."""
        if modifier.is_empty():
            _LOGGER.debug("Skipping PUT %s: %s is empty", path, type(modifier).__name__)
            return MixedResponse()
        raw = await self._transport.send(METHOD_PUT, path, modifier.to_api_payload())
        return MixedResponse.from_api(raw)

    async def _get(self, path: str, factory: Callable[[Any], T]) -> T:
        raw = await self._transport.send(METHOD_GET, path)
        return decode_resource(raw, factory)

    async def _get_resource(self, endpoint: str, resource_id: str, factory: Callable[[Any], Any]) -> Any:
        resource = await self._get(f"{endpoint}/{resource_id}", factory)
        return resource.with_id(resource_id)

    async def _get_all(self, endpoint: str, factory: Callable[[Any], Any]) -> list[Any]:
        raw = await self._transport.send(METHOD_GET, endpoint)
        return [
            resource.with_id(resource_id)
            for resource_id, resource in decode_collection(raw, factory)
        ]

    async def _create(self, endpoint: str, creator: Any, resource: str) -> str:
        raw = await self._transport.send(METHOD_POST, endpoint, creator.to_api_payload())
        resource_id = created_id(raw, resource)
        _LOGGER.debug("Created %s %s", resource, resource_id)
        return resource_id

    async def _delete(self, endpoint: str, resource_id: str) -> None:
        raw = await self._transport.send(METHOD_DELETE, f"{endpoint}/{resource_id}")
        raise_for_failure(raw)

    async def _search(self, endpoint: str, device_ids: Sequence[str] | None) -> None:
        body: SearchPayload | None = None
        if device_ids:
            body = {"deviceid": list(device_ids)}
        raw = await self._transport.send(METHOD_POST, endpoint, body)
        raise_for_failure(raw)

    # === Configuration ===

    async def get_config(self) -> Config:
        """Return the configuration of the bridge."""
        return await self._get(ENDPOINT_CONFIG, Config.from_api)

    async def set_config(self, modifier: ConfigModifier) -> MixedResponse:
        """Modify the configuration of the bridge."""
        return await self._modify(ENDPOINT_CONFIG, modifier)

    async def get_capabilities(self) -> Capabilities:
        """Return how many resources of each kind the bridge can still hold."""
        return await self._get(ENDPOINT_CAPABILITIES, Capabilities.from_api)

    # === Lights ===

    async def set_light_attribute(
        self, light_id: str, modifier: LightAttributeModifier
    ) -> MixedResponse:
        """Modify attributes of a light."""
        return await self._modify(f"{ENDPOINT_LIGHTS}/{light_id}", modifier)

    async def set_light_state(self, light_id: str, modifier: LightStateModifier) -> MixedResponse:
        """Modify the state of a light.

        Args:
            light_id: Identifier of the light
            modifier: State changes, e.g.
                LightStateModifier().brightness(ModifierType.INCREMENT, 40)

        Returns:
            One outcome per changed field. Failures are not raised, call
            into_result() to turn the first one into an exception.
        """
        return await self._modify(f"{ENDPOINT_LIGHTS}/{light_id}/{SUFFIX_LIGHT_STATE}", modifier)

    async def get_light(self, light_id: str) -> Light:
        return await self._get_resource(ENDPOINT_LIGHTS, light_id, Light.from_api)

    async def get_all_lights(self) -> list[Light]:
        """Return all lights connected to the bridge."""
        return await self._get_all(ENDPOINT_LIGHTS, Light.from_api)

    async def search_new_lights(self, device_ids: Sequence[str] | None = None) -> None:
        """Start searching for new lights.

        The bridge opens the network for 40 seconds. Found lights are
        returned by get_new_lights() once the search has finished.

        Args:
            device_ids: Serial numbers of lights to search for, all if None
        """
        await self._search(ENDPOINT_LIGHTS, device_ids)

    async def get_new_lights(self) -> Scan:
        """Return lights found by the last search."""
        return await self._get(f"{ENDPOINT_LIGHTS}/{SUFFIX_NEW}", Scan.from_api)

    async def delete_light(self, light_id: str) -> None:
        await self._delete(ENDPOINT_LIGHTS, light_id)

    # === Groups ===

    async def create_group(self, creator: GroupCreator) -> str:
        """Create a group and return its identifier."""
        return await self._create(ENDPOINT_GROUPS, creator, "group")

    async def set_group_attribute(
        self, group_id: str, modifier: GroupAttributeModifier
    ) -> MixedResponse:
        """Modify attributes of a group."""
        return await self._modify(f"{ENDPOINT_GROUPS}/{group_id}", modifier)

    async def set_group_state(self, group_id: str, modifier: GroupStateModifier) -> MixedResponse:
        """Modify the state of all lights in a group."""
        return await self._modify(f"{ENDPOINT_GROUPS}/{group_id}/{SUFFIX_GROUP_ACTION}", modifier)

    async def get_group(self, group_id: str) -> Group:
        return await self._get_resource(ENDPOINT_GROUPS, group_id, Group.from_api)

    async def get_all_groups(self) -> list[Group]:
        return await self._get_all(ENDPOINT_GROUPS, Group.from_api)

    async def delete_group(self, group_id: str) -> None:
        await self._delete(ENDPOINT_GROUPS, group_id)

    # === Scenes ===

    async def create_scene(self, creator: SceneCreator) -> str:
        """Create a scene and return its identifier."""
        return await self._create(ENDPOINT_SCENES, creator, "scene")

    async def set_scene(self, scene_id: str, modifier: SceneModifier) -> MixedResponse:
        """Modify attributes of a scene."""
        return await self._modify(f"{ENDPOINT_SCENES}/{scene_id}", modifier)

    async def get_scene(self, scene_id: str) -> Scene:
        return await self._get_resource(ENDPOINT_SCENES, scene_id, Scene.from_api)

    async def get_all_scenes(self) -> list[Scene]:
        return await self._get_all(ENDPOINT_SCENES, Scene.from_api)

    async def delete_scene(self, scene_id: str) -> None:
        await self._delete(ENDPOINT_SCENES, scene_id)

    # === Schedules ===

    async def create_schedule(self, creator: ScheduleCreator) -> str:
        """Create a schedule and return its identifier."""
        return await self._create(ENDPOINT_SCHEDULES, creator, "schedule")

    async def set_schedule(self, schedule_id: str, modifier: ScheduleModifier) -> MixedResponse:
        """Modify attributes of a schedule."""
        return await self._modify(f"{ENDPOINT_SCHEDULES}/{schedule_id}", modifier)

    async def get_schedule(self, schedule_id: str) -> Schedule:
        return await self._get_resource(ENDPOINT_SCHEDULES, schedule_id, Schedule.from_api)

    async def get_all_schedules(self) -> list[Schedule]:
        return await self._get_all(ENDPOINT_SCHEDULES, Schedule.from_api)

    async def delete_schedule(self, schedule_id: str) -> None:
        await self._delete(ENDPOINT_SCHEDULES, schedule_id)

    # === Resourcelinks ===

    async def create_resourcelink(self, creator: ResourcelinkCreator) -> str:
        """Create a resourcelink and return its identifier."""
        return await self._create(ENDPOINT_RESOURCELINKS, creator, "resourcelink")

    async def set_resourcelink(
        self, resourcelink_id: str, modifier: ResourcelinkModifier
    ) -> MixedResponse:
        """Modify attributes of a resourcelink."""
        return await self._modify(f"{ENDPOINT_RESOURCELINKS}/{resourcelink_id}", modifier)

    async def get_resourcelink(self, resourcelink_id: str) -> Resourcelink:
        return await self._get_resource(
            ENDPOINT_RESOURCELINKS, resourcelink_id, Resourcelink.from_api
        )

    async def get_all_resourcelinks(self) -> list[Resourcelink]:
        return await self._get_all(ENDPOINT_RESOURCELINKS, Resourcelink.from_api)

    async def delete_resourcelink(self, resourcelink_id: str) -> None:
        await self._delete(ENDPOINT_RESOURCELINKS, resourcelink_id)

    # === Sensors ===

    async def set_sensor_attribute(
        self, sensor_id: str, modifier: SensorAttributeModifier
    ) -> MixedResponse:
        """Modify attributes of a sensor."""
        return await self._modify(f"{ENDPOINT_SENSORS}/{sensor_id}", modifier)

    async def set_sensor_state(self, sensor_id: str, modifier: SensorStateModifier) -> MixedResponse:
        """Modify the state of a sensor."""
        return await self._modify(f"{ENDPOINT_SENSORS}/{sensor_id}/{SUFFIX_SENSOR_STATE}", modifier)

    async def set_sensor_config(
        self, sensor_id: str, modifier: SensorConfigModifier
    ) -> MixedResponse:
        """Modify the configuration of a sensor."""
        return await self._modify(f"{ENDPOINT_SENSORS}/{sensor_id}/{SUFFIX_SENSOR_CONFIG}", modifier)

    async def get_sensor(self, sensor_id: str) -> Sensor:
        return await self._get_resource(ENDPOINT_SENSORS, sensor_id, Sensor.from_api)

    async def get_all_sensors(self) -> list[Sensor]:
        """Return all sensors connected to the bridge."""
        return await self._get_all(ENDPOINT_SENSORS, Sensor.from_api)

    async def search_new_sensors(self, device_ids: Sequence[str] | None = None) -> None:
        """Start searching for new sensors.

        Works like search_new_lights(); results are returned by
        get_new_sensors().
        """
        await self._search(ENDPOINT_SENSORS, device_ids)

    async def get_new_sensors(self) -> Scan:
        """Return sensors found by the last search."""
        return await self._get(f"{ENDPOINT_SENSORS}/{SUFFIX_NEW}", Scan.from_api)

    async def delete_sensor(self, sensor_id: str) -> None:
        await self._delete(ENDPOINT_SENSORS, sensor_id)

    # === Rules ===

    async def create_rule(self, creator: RuleCreator) -> str:
        """Create a rule and return its identifier."""
        return await self._create(ENDPOINT_RULES, creator, "rule")

    async def set_rule(self, rule_id: str, modifier: RuleModifier) -> MixedResponse:
        """Modify attributes of a rule."""
        return await self._modify(f"{ENDPOINT_RULES}/{rule_id}", modifier)

    async def get_rule(self, rule_id: str) -> Rule:
        return await self._get_resource(ENDPOINT_RULES, rule_id, Rule.from_api)

    async def get_all_rules(self) -> list[Rule]:
        return await self._get_all(ENDPOINT_RULES, Rule.from_api)

    async def delete_rule(self, rule_id: str) -> None:
        await self._delete(ENDPOINT_RULES, rule_id)
