"""Hue bridge resource models and modifiers."""
from __future__ import annotations

from .capabilities import Capabilities, Capability
from .common import (
    Action,
    ActionRequestType,
    Alert,
    ColorMode,
    Effect,
    LastScan,
    LastScanKind,
    Scan,
    ScanResource,
    User,
)
from .config import Config, ConfigModifier, WhitelistEntry
from .group import (
    Group,
    GroupAttributeModifier,
    GroupCreator,
    GroupState,
    GroupStateModifier,
)
from .light import Light, LightAttributeModifier, LightState, LightStateModifier
from .modifier import CoordinateModifierType, FieldSpec, Modifier, ModifierType
from .resourcelink import Resourcelink, ResourcelinkCreator, ResourcelinkModifier
from .rule import Condition, Rule, RuleCreator, RuleModifier
from .scene import Scene, SceneCreator, SceneModifier
from .schedule import Schedule, ScheduleCreator, ScheduleModifier
from .sensor import (
    Sensor,
    SensorAttributeModifier,
    SensorConfigModifier,
    SensorStateModifier,
)

__all__ = [
    # Modifiers
    "Modifier",
    "ModifierType",
    "CoordinateModifierType",
    "FieldSpec",
    "ConfigModifier",
    "LightAttributeModifier",
    "LightStateModifier",
    "GroupAttributeModifier",
    "GroupStateModifier",
    "SceneModifier",
    "ScheduleModifier",
    "SensorAttributeModifier",
    "SensorStateModifier",
    "SensorConfigModifier",
    "RuleModifier",
    "ResourcelinkModifier",
    # Creators
    "GroupCreator",
    "SceneCreator",
    "ScheduleCreator",
    "RuleCreator",
    "ResourcelinkCreator",
    # Resources
    "Capabilities",
    "Capability",
    "Config",
    "WhitelistEntry",
    "Group",
    "GroupState",
    "Light",
    "LightState",
    "Resourcelink",
    "Rule",
    "Condition",
    "Scene",
    "Schedule",
    "Sensor",
    # Shared types
    "Action",
    "ActionRequestType",
    "Alert",
    "ColorMode",
    "Effect",
    "LastScan",
    "LastScanKind",
    "Scan",
    "ScanResource",
    "User",
]
