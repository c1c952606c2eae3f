"""Test Hue bridge client."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from huelib.api.client import HueBridge, discover, register_user
from huelib.api.exceptions import (
    HueBridgeError,
    HueMissingIdError,
    HueMissingUsernameError,
    HueParseError,
)
from huelib.api.responses import Failure, MixedResponse, Success
from huelib.api.transport import BridgeTransport
from huelib.models import (
    Action,
    ActionRequestType,
    Condition,
    ConfigModifier,
    CoordinateModifierType,
    GroupCreator,
    GroupStateModifier,
    LastScanKind,
    LightAttributeModifier,
    LightStateModifier,
    ModifierType,
    ResourcelinkCreator,
    RuleCreator,
    SceneCreator,
    SceneModifier,
    ScheduleCreator,
    SensorConfigModifier,
    SensorStateModifier,
)


# ==============================================================================
# Initialization Tests
# ==============================================================================


class TestHueBridgeInit:
    """Test HueBridge construction and lifecycle."""

    def test_default_transport(self):
        """Test default transport is rooted at /api/<username>."""
        bridge = HueBridge("192.168.1.2", "test_user")

        assert isinstance(bridge._transport, BridgeTransport)
        assert bridge._transport.base_url == "http://192.168.1.2/api/test_user"

    def test_default_transport_uses_session(self):
        """Test given session is passed to the default transport."""
        mock_session = MagicMock(spec=aiohttp.ClientSession)
        bridge = HueBridge("192.168.1.2", "test_user", session=mock_session)

        assert bridge._transport._session is mock_session
        assert bridge._transport._owns_session is False

    def test_custom_transport(self, mock_transport):
        """Test given transport is used as is."""
        bridge = HueBridge("192.168.1.2", "test_user", transport=mock_transport)

        assert bridge._transport is mock_transport

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self, bridge, mock_transport):
        """Test context manager exit closes the transport."""
        async with bridge:
            pass

        mock_transport.close.assert_called_once()


# ==============================================================================
# Write Operation Tests
# ==============================================================================


class TestSetOperations:
    """Test set_* operations."""

    @pytest.mark.asyncio
    async def test_set_light_state(self, bridge, mock_transport):
        """Test brightness change is sent and decoded."""
        mock_transport.send.return_value = [{"success": {"/lights/1/state/bri": 200}}]

        response = await bridge.set_light_state(
            "1", LightStateModifier().brightness(ModifierType.OVERRIDE, 200)
        )

        mock_transport.send.assert_called_once_with("PUT", "lights/1/state", {"bri": 200})
        assert response.successes == [Success(path="/lights/1/state/bri", value=200)]
        response.into_result()

    @pytest.mark.asyncio
    async def test_set_does_not_raise_on_failure(self, bridge, mock_transport):
        """Test bridge failures are returned, not raised."""
        mock_transport.send.return_value = [
            {"success": {"/lights/1/state/on": True}},
            {
                "error": {
                    "type": 201,
                    "address": "/lights/1/state/bri",
                    "description": "parameter, bri, is not modifiable. Device is set to off.",
                }
            },
        ]

        response = await bridge.set_light_state(
            "1", LightStateModifier().on(True).brightness(ModifierType.OVERRIDE, 10)
        )

        assert len(response) == 2
        assert response.failures[0].error_type == 201
        with pytest.raises(HueBridgeError):
            response.into_result()

    @pytest.mark.asyncio
    async def test_empty_modifier_skips_request(self, bridge, mock_transport):
        """Test empty modifier is a local no-op."""
        response = await bridge.set_light_state("1", LightStateModifier())

        mock_transport.send.assert_not_called()
        assert response == MixedResponse()

    @pytest.mark.asyncio
    async def test_set_light_attribute(self, bridge, mock_transport):
        """Test rename is sent to the light itself."""
        mock_transport.send.return_value = [{"success": {"/lights/1/name": "Desk"}}]

        await bridge.set_light_attribute("1", LightAttributeModifier().name("Desk"))

        mock_transport.send.assert_called_once_with("PUT", "lights/1", {"name": "Desk"})

    @pytest.mark.asyncio
    async def test_set_group_state(self, bridge, mock_transport):
        """Test group action path and coordinate delta."""
        mock_transport.send.return_value = [{"success": {"/groups/1/action/xy_inc": [0.1, -0.2]}}]
        modifier = GroupStateModifier().color_space_coordinates(
            CoordinateModifierType.INCREMENT_DECREMENT, 0.1, 0.2
        )

        await bridge.set_group_state("1", modifier)

        mock_transport.send.assert_called_once_with(
            "PUT", "groups/1/action", {"xy_inc": [0.1, -0.2]}
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "modifier", "path"),
        [
            ("set_config", ConfigModifier().name("Bridge"), "config"),
            ("set_scene", SceneModifier().name("Relax"), "scenes/abc"),
            ("set_sensor_state", SensorStateModifier().flag(True), "sensors/abc/state"),
            ("set_sensor_config", SensorConfigModifier().on(False), "sensors/abc/config"),
        ],
    )
    async def test_set_paths(self, bridge, mock_transport, method, modifier, path):
        """Test set_* operations address the right endpoint."""
        mock_transport.send.return_value = []

        if method == "set_config":
            await bridge.set_config(modifier)
        else:
            await getattr(bridge, method)("abc", modifier)

        assert mock_transport.send.call_args[0][:2] == ("PUT", path)


# ==============================================================================
# Read Operation Tests
# ==============================================================================


class TestGetOperations:
    """Test get_* and get_all_* operations."""

    @pytest.mark.asyncio
    async def test_get_light_injects_id(self, bridge, mock_transport, light_payload):
        """Test single get injects the requested id."""
        mock_transport.send.return_value = light_payload

        light = await bridge.get_light("1")

        mock_transport.send.assert_called_once_with("GET", "lights/1")
        assert light.id == "1"
        assert light.name == "Hue Lamp 1"

    @pytest.mark.asyncio
    async def test_get_all_lights_injects_ids(self, bridge, mock_transport, lights_payload):
        """Test get-all ids come from the map keys."""
        mock_transport.send.return_value = lights_payload

        lights = await bridge.get_all_lights()

        assert [light.id for light in lights] == ["1", "2"]
        assert [light.name for light in lights] == ["Hue Lamp 1", "Hue Lamp 2"]

    @pytest.mark.asyncio
    async def test_get_all_ignores_id_in_body(self, bridge, mock_transport, group_payload):
        """Test an id field inside the body does not override the map key."""
        mock_transport.send.return_value = {"7": dict(group_payload, id="999")}

        (group,) = await bridge.get_all_groups()

        assert group.id == "7"

    @pytest.mark.asyncio
    async def test_get_unknown_light(self, bridge, mock_transport):
        """Test bulk error on a read endpoint raises."""
        mock_transport.send.return_value = [
            {"error": {"type": 3, "address": "/lights/5", "description": "resource not available"}}
        ]

        with pytest.raises(HueBridgeError) as exc_info:
            await bridge.get_light("5")

        assert exc_info.value.description == "resource not available"

    @pytest.mark.asyncio
    async def test_get_config(self, bridge, mock_transport, config_payload):
        """Test configuration is decoded."""
        mock_transport.send.return_value = config_payload

        config = await bridge.get_config()

        mock_transport.send.assert_called_once_with("GET", "config")
        assert config.bridge_id == "001788FFFE100491"

    @pytest.mark.asyncio
    async def test_get_capabilities(self, bridge, mock_transport, capabilities_payload):
        """Test capabilities are decoded."""
        mock_transport.send.return_value = capabilities_payload

        capabilities = await bridge.get_capabilities()

        assert capabilities.lights.available == 50
        assert capabilities.timezones == ("Africa/Abidjan", "Europe/Berlin")

    @pytest.mark.asyncio
    async def test_get_rule(self, bridge, mock_transport, rule_payload):
        """Test rule is decoded with id."""
        mock_transport.send.return_value = rule_payload

        rule = await bridge.get_rule("1")

        assert rule.id == "1"
        assert rule.conditions[1].value is None

    @pytest.mark.asyncio
    async def test_get_all_schedules(self, bridge, mock_transport, schedule_payload):
        """Test schedules are decoded with ids."""
        mock_transport.send.return_value = {"1": schedule_payload}

        (schedule,) = await bridge.get_all_schedules()

        assert schedule.id == "1"
        assert schedule.command.request_type is ActionRequestType.PUT

    @pytest.mark.asyncio
    async def test_get_new_lights(self, bridge, mock_transport):
        """Test search result is decoded."""
        mock_transport.send.return_value = {"7": {"name": "Hue Lamp 7"}, "lastscan": "active"}

        scan = await bridge.get_new_lights()

        mock_transport.send.assert_called_once_with("GET", "lights/new")
        assert scan.last_scan.kind is LastScanKind.ACTIVE
        assert [r.id for r in scan.resources] == ["7"]

    @pytest.mark.asyncio
    async def test_get_all_sensors_empty(self, bridge, mock_transport):
        """Test empty collection decodes to an empty list."""
        mock_transport.send.return_value = {}

        assert await bridge.get_all_sensors() == []


# ==============================================================================
# Create, Delete and Search Tests
# ==============================================================================


class TestCreateOperations:
    """Test create_* operations."""

    @pytest.mark.asyncio
    async def test_create_group(self, bridge, mock_transport):
        """Test group payload and returned id."""
        mock_transport.send.return_value = [{"success": {"id": "3"}}]

        group_id = await bridge.create_group(
            GroupCreator(name="Kitchen", lights=("1", "2"), type="Room", class_="Kitchen")
        )

        assert group_id == "3"
        mock_transport.send.assert_called_once_with(
            "POST",
            "groups",
            {"name": "Kitchen", "lights": ["1", "2"], "type": "Room", "class": "Kitchen"},
        )

    @pytest.mark.asyncio
    async def test_create_scene_missing_id(self, bridge, mock_transport):
        """Test creation without id in the response."""
        mock_transport.send.return_value = [{"success": {"/scenes/name": "Relax"}}]

        with pytest.raises(HueMissingIdError):
            await bridge.create_scene(SceneCreator(name="Relax", lights=("1",)))

    @pytest.mark.asyncio
    async def test_create_rule(self, bridge, mock_transport):
        """Test rule payload serializes conditions and actions."""
        mock_transport.send.return_value = [{"success": {"id": "5"}}]
        creator = RuleCreator(
            conditions=(Condition("/sensors/2/state/buttonevent", "eq", "16"),),
            actions=(Action("/groups/0/action", ActionRequestType.PUT, {"on": True}),),
            name="Switch",
        )

        assert await bridge.create_rule(creator) == "5"
        assert mock_transport.send.call_args[0][2] == {
            "conditions": [
                {"address": "/sensors/2/state/buttonevent", "operator": "eq", "value": "16"}
            ],
            "actions": [{"address": "/groups/0/action", "method": "PUT", "body": {"on": True}}],
            "name": "Switch",
        }

    @pytest.mark.asyncio
    async def test_create_schedule_failure(self, bridge, mock_transport):
        """Test bridge error on creation raises."""
        mock_transport.send.return_value = [
            {"error": {"type": 7, "address": "/schedules/localtime", "description": "invalid value"}}
        ]
        creator = ScheduleCreator(
            command=Action("/api/u/lights/1/state", ActionRequestType.PUT, {"on": False}),
            localtime="PT00:10:00",
        )

        with pytest.raises(HueBridgeError):
            await bridge.create_schedule(creator)

    @pytest.mark.asyncio
    async def test_create_resourcelink(self, bridge, mock_transport):
        """Test resourcelink creation."""
        mock_transport.send.return_value = [{"success": {"id": "12"}}]

        resourcelink_id = await bridge.create_resourcelink(
            ResourcelinkCreator(name="Alarm", class_id=1, links=("/schedules/1",))
        )

        assert resourcelink_id == "12"


class TestDeleteAndSearch:
    """Test delete_* and search_new_* operations."""

    @pytest.mark.asyncio
    async def test_delete_light(self, bridge, mock_transport):
        """Test DELETE message success."""
        mock_transport.send.return_value = [{"success": "/lights/1 deleted"}]

        assert await bridge.delete_light("1") is None
        mock_transport.send.assert_called_once_with("DELETE", "lights/1")

    @pytest.mark.asyncio
    async def test_delete_unknown_scene(self, bridge, mock_transport):
        """Test DELETE failure raises."""
        mock_transport.send.return_value = [
            {"error": {"type": 3, "address": "/scenes/x", "description": "resource not available"}}
        ]

        with pytest.raises(HueBridgeError):
            await bridge.delete_scene("x")

    @pytest.mark.asyncio
    async def test_search_all_lights(self, bridge, mock_transport):
        """Test search without device ids has no body."""
        mock_transport.send.return_value = [{"success": {"/lights": "Searching for new devices"}}]

        await bridge.search_new_lights()

        mock_transport.send.assert_called_once_with("POST", "lights", None)

    @pytest.mark.asyncio
    async def test_search_sensors_by_id(self, bridge, mock_transport):
        """Test search with device ids."""
        mock_transport.send.return_value = [{"success": {"/sensors": "Searching for new devices"}}]

        await bridge.search_new_sensors(["45AF34", "543636"])

        mock_transport.send.assert_called_once_with(
            "POST", "sensors", {"deviceid": ["45AF34", "543636"]}
        )


# ==============================================================================
# Discovery and Registration Tests
# ==============================================================================


class TestDiscover:
    """Test discover()."""

    @pytest.mark.asyncio
    async def test_discover(self):
        """Test addresses are returned."""
        with patch.object(BridgeTransport, "send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = [
                {"id": "001788fffe100491", "internalipaddress": "192.168.1.2"},
                {"id": "001788fffe09a206", "internalipaddress": "fe80::1", "port": 443},
            ]
            addresses = await discover(session=MagicMock(spec=aiohttp.ClientSession))

        assert addresses == ["192.168.1.2", "fe80::1"]
        mock_send.assert_called_once_with("GET", "")

    @pytest.mark.asyncio
    async def test_discover_invalid_address(self):
        """Test invalid address is a parse error."""
        with patch.object(BridgeTransport, "send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = [{"id": "x", "internalipaddress": "not-an-ip"}]

            with pytest.raises(HueParseError):
                await discover(session=MagicMock(spec=aiohttp.ClientSession))

    @pytest.mark.asyncio
    async def test_discover_closes_transport_on_error(self):
        """Test transport is closed when the request fails."""
        with patch.object(
            BridgeTransport, "send", new_callable=AsyncMock, side_effect=HueParseError()
        ), patch.object(BridgeTransport, "close", new_callable=AsyncMock) as mock_close:
            with pytest.raises(HueParseError):
                await discover()

        mock_close.assert_called_once()


class TestRegisterUser:
    """Test register_user()."""

    @pytest.mark.asyncio
    async def test_register(self):
        """Test username and client key are returned."""
        with patch.object(BridgeTransport, "send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = [
                {"success": {"username": "83b7780291a6ceffbe0bd049104df", "clientkey": "33DD"}}
            ]
            user = await register_user(
                "192.168.1.2",
                "huelib#laptop",
                generate_clientkey=True,
                session=MagicMock(spec=aiohttp.ClientSession),
            )

        assert user.name == "83b7780291a6ceffbe0bd049104df"
        assert user.client_key == "33DD"
        mock_send.assert_called_once_with(
            "POST", "", {"devicetype": "huelib#laptop", "generateclientkey": True}
        )

    @pytest.mark.asyncio
    async def test_link_button_not_pressed(self):
        """Test bridge refusal raises with the bridge error type."""
        with patch.object(BridgeTransport, "send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = [
                {"error": {"type": 101, "address": "", "description": "link button not pressed"}}
            ]

            with pytest.raises(HueBridgeError) as exc_info:
                await register_user(
                    "192.168.1.2", "huelib#laptop", session=MagicMock(spec=aiohttp.ClientSession)
                )

        assert exc_info.value.error_type == 101
        assert exc_info.value.failure == Failure("link button not pressed", "", 101)

    @pytest.mark.asyncio
    async def test_register_without_client_key(self):
        """Test client key is None when the bridge did not generate one."""
        with patch.object(BridgeTransport, "send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = [{"success": {"username": "83b7780291a6ceffbe0bd049104df"}}]
            user = await register_user(
                "192.168.1.2", "huelib#laptop", session=MagicMock(spec=aiohttp.ClientSession)
            )

        assert user.client_key is None
        mock_send.assert_called_once_with("POST", "", {"devicetype": "huelib#laptop"})

    @pytest.mark.asyncio
    async def test_missing_username(self):
        """Test success without username."""
        with patch.object(BridgeTransport, "send", new_callable=AsyncMock) as mock_send:
            mock_send.return_value = [{"success": {"clientkey": "33DD"}}]

            with pytest.raises(HueMissingUsernameError):
                await register_user(
                    "192.168.1.2", "huelib#laptop", session=MagicMock(spec=aiohttp.ClientSession)
                )
