"""Bridge configuration and its modifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from typing_extensions import Self

from .modifier import FieldSpec, Modifier, field_table

CONFIG_FIELDS = field_table(
    FieldSpec("name"),
    FieldSpec("zigbeechannel"),
    FieldSpec("ipaddress"),
    FieldSpec("dhcp"),
    FieldSpec("netmask"),
    FieldSpec("gateway"),
    FieldSpec("proxyaddress"),
    FieldSpec("proxyport"),
    FieldSpec("UTC"),
    FieldSpec("timezone"),
    FieldSpec("linkbutton"),
    FieldSpec("touchlink"),
)


@dataclass(frozen=True)
class WhitelistEntry:
    """User allowed to access the bridge."""

    name: str
    last_use_date: str | None = None
    create_date: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> WhitelistEntry:
        return cls(
            name=data["name"],
            last_use_date=data.get("last use date"),
            create_date=data.get("create date"),
        )


@dataclass(frozen=True)
class Config:
    """Configuration of the bridge.

    Unauthorized users get a reduced configuration, so everything but the
    name is optional.
    """

    name: str
    bridge_id: str | None = None
    mac: str | None = None
    zigbee_channel: int | None = None
    dhcp: bool | None = None
    ip_address: str | None = None
    netmask: str | None = None
    gateway: str | None = None
    proxy_address: str | None = None
    proxy_port: int | None = None
    utc: str | None = None
    local_time: str | None = None
    timezone: str | None = None
    model_id: str | None = None
    software_version: str | None = None
    api_version: str | None = None
    link_button: bool | None = None
    whitelist: dict[str, WhitelistEntry] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Config:
        whitelist = {
            user_id: WhitelistEntry.from_api(entry)
            for user_id, entry in data.get("whitelist", {}).items()
        }
        return cls(
            name=data["name"],
            bridge_id=data.get("bridgeid"),
            mac=data.get("mac"),
            zigbee_channel=data.get("zigbeechannel"),
            dhcp=data.get("dhcp"),
            ip_address=data.get("ipaddress"),
            netmask=data.get("netmask"),
            gateway=data.get("gateway"),
            proxy_address=data.get("proxyaddress"),
            proxy_port=data.get("proxyport"),
            utc=data.get("UTC"),
            local_time=data.get("localtime"),
            timezone=data.get("timezone"),
            model_id=data.get("modelid"),
            software_version=data.get("swversion"),
            api_version=data.get("apiversion"),
            link_button=data.get("linkbutton"),
            whitelist=whitelist,
        )


class ConfigModifier(Modifier):
    """Modifies the configuration of the bridge."""

    def __init__(self) -> None:
        super().__init__(CONFIG_FIELDS)

    def name(self, value: str) -> Self:
        return self.override("name", value)

    def zigbee_channel(self, value: int) -> Self:
        return self.override("zigbeechannel", value)

    def ip_address(self, value: str) -> Self:
        return self.override("ipaddress", value)

    def dhcp(self, value: bool) -> Self:
        return self.override("dhcp", value)

    def netmask(self, value: str) -> Self:
        return self.override("netmask", value)

    def gateway(self, value: str) -> Self:
        return self.override("gateway", value)

    def proxy_address(self, value: str) -> Self:
        return self.override("proxyaddress", value)

    def proxy_port(self, value: int) -> Self:
        return self.override("proxyport", value)

    def utc(self, value: str) -> Self:
        return self.override("UTC", value)

    def timezone(self, value: str) -> Self:
        return self.override("timezone", value)

    def link_button(self, value: bool) -> Self:
        """Simulate a press of the link button."""
        return self.override("linkbutton", value)

    def touchlink(self, value: bool) -> Self:
        return self.override("touchlink", value)
