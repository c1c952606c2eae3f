"""Shared test fixtures for the Hue bridge client tests."""
from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from huelib.api.client import HueBridge
from huelib.api.transport import BridgeTransport


# ==============================================================================
# Wire Payload Fixtures
# ==============================================================================


@pytest.fixture
def light_payload() -> dict[str, Any]:
    """Body of GET /lights/<id> for a color light."""
    return {
        "state": {
            "on": True,
            "bri": 144,
            "hue": 13088,
            "sat": 212,
            "xy": [0.5128, 0.4147],
            "ct": 467,
            "alert": "none",
            "effect": "none",
            "colormode": "xy",
            "reachable": True,
        },
        "type": "Extended color light",
        "name": "Hue Lamp 1",
        "modelid": "LCT001",
        "manufacturername": "Philips",
        "productname": "Hue color lamp",
        "uniqueid": "00:17:88:01:00:bd:c7:b9-0b",
        "swversion": "5.105.0.21169",
    }


@pytest.fixture
def lights_payload(light_payload: dict[str, Any]) -> dict[str, Any]:
    """Body of GET /lights with two lights."""
    second = dict(light_payload, name="Hue Lamp 2", uniqueid="00:17:88:01:00:bd:c7:ba-0b")
    return {"1": light_payload, "2": second}


@pytest.fixture
def group_payload() -> dict[str, Any]:
    """Body of GET /groups/<id> for a room."""
    return {
        "name": "Living room",
        "lights": ["1", "2"],
        "sensors": [],
        "type": "Room",
        "state": {"all_on": False, "any_on": True},
        "recycle": False,
        "class": "Living room",
        "action": {
            "on": True,
            "bri": 254,
            "hue": 8402,
            "sat": 140,
            "xy": [0.4573, 0.41],
            "ct": 366,
            "alert": "select",
            "effect": "none",
            "colormode": "ct",
        },
    }


@pytest.fixture
def config_payload() -> dict[str, Any]:
    """Body of GET /config for an authorized user."""
    return {
        "name": "Philips hue",
        "zigbeechannel": 15,
        "bridgeid": "001788FFFE100491",
        "mac": "00:17:88:10:04:91",
        "dhcp": True,
        "ipaddress": "192.168.1.2",
        "netmask": "255.255.255.0",
        "gateway": "192.168.1.1",
        "proxyaddress": "none",
        "proxyport": 0,
        "UTC": "2021-03-01T10:15:00",
        "localtime": "2021-03-01T11:15:00",
        "timezone": "Europe/Berlin",
        "modelid": "BSB002",
        "swversion": "1941132080",
        "apiversion": "1.41.0",
        "linkbutton": False,
        "whitelist": {
            "83b7780291a6ceffbe0bd049104df": {
                "last use date": "2021-03-01T10:14:00",
                "create date": "2020-11-02T09:00:00",
                "name": "huelib#laptop",
            },
        },
    }


@pytest.fixture
def capabilities_payload() -> dict[str, Any]:
    """Body of GET /capabilities."""
    return {
        "lights": {"available": 50, "total": 63},
        "sensors": {"available": 240, "total": 250},
        "groups": {"available": 60},
        "scenes": {"available": 172},
        "schedules": {"available": 95},
        "rules": {"available": 233},
        "resourcelinks": {"available": 59},
        "timezones": {"values": ["Africa/Abidjan", "Europe/Berlin"]},
    }


@pytest.fixture
def rule_payload() -> dict[str, Any]:
    """Body of GET /rules/<id>."""
    return {
        "name": "Wall Switch Rule",
        "owner": "78H56B12BA",
        "created": "2014-06-04T10:15:00",
        "lasttriggered": "none",
        "timestriggered": 0,
        "status": "enabled",
        "recycle": False,
        "conditions": [
            {"address": "/sensors/2/state/buttonevent", "operator": "eq", "value": "16"},
            {"address": "/sensors/2/state/lastupdated", "operator": "dx"},
        ],
        "actions": [
            {"address": "/groups/0/action", "method": "PUT", "body": {"scene": "S3"}},
        ],
    }


@pytest.fixture
def schedule_payload() -> dict[str, Any]:
    """Body of GET /schedules/<id>."""
    return {
        "name": "Wake up",
        "description": "My wake up alarm",
        "command": {
            "address": "/api/user/groups/1/action",
            "method": "PUT",
            "body": {"on": True},
        },
        "localtime": "W124/T06:00:00",
        "status": "enabled",
        "autodelete": False,
        "starttime": "2021-03-01T10:15:00",
        "recycle": False,
    }


# ==============================================================================
# Client Fixtures
# ==============================================================================


@pytest.fixture
def mock_transport() -> MagicMock:
    """Transport whose send() returns whatever a test configures."""
    transport = MagicMock(spec=BridgeTransport)
    transport.send = AsyncMock()
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def bridge(mock_transport: MagicMock) -> HueBridge:
    """Bridge client backed by the mock transport."""
    return HueBridge("192.168.1.2", "test_user", transport=mock_transport)
