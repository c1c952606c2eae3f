from __future__ import annotations

DISCOVERY_URL = "https://discovery.meethue.com/"

# All authenticated endpoints live below /api/<username>
API_PATH = "api"

ENDPOINT_CONFIG = "config"
ENDPOINT_CAPABILITIES = "capabilities"
ENDPOINT_LIGHTS = "lights"
ENDPOINT_GROUPS = "groups"
ENDPOINT_SCENES = "scenes"
ENDPOINT_SCHEDULES = "schedules"
ENDPOINT_SENSORS = "sensors"
ENDPOINT_RULES = "rules"
ENDPOINT_RESOURCELINKS = "resourcelinks"

# Suffixes appended to a single resource path
SUFFIX_LIGHT_STATE = "state"
SUFFIX_GROUP_ACTION = "action"
SUFFIX_SENSOR_STATE = "state"
SUFFIX_SENSOR_CONFIG = "config"
SUFFIX_NEW = "new"

METHOD_GET = "GET"
METHOD_PUT = "PUT"
METHOD_POST = "POST"
METHOD_DELETE = "DELETE"

# Keys of the bulk response wire format
RESPONSE_SUCCESS = "success"
RESPONSE_ERROR = "error"

# Path of the identifier inside a creation response: [{"success": {"id": "3"}}]
CREATED_ID_PATH = "id"

# Bridge error codes ("type" field of an error entry)
ERROR_UNAUTHORIZED_USER = 1
ERROR_INVALID_JSON = 2
ERROR_RESOURCE_NOT_AVAILABLE = 3
ERROR_METHOD_NOT_AVAILABLE = 4
ERROR_MISSING_PARAMETERS = 5
ERROR_PARAMETER_NOT_AVAILABLE = 6
ERROR_INVALID_VALUE = 7
ERROR_PARAMETER_NOT_MODIFIABLE = 8
ERROR_TOO_MANY_ITEMS = 11
ERROR_LINK_BUTTON_NOT_PRESSED = 101
ERROR_DEVICE_OFF = 201
ERROR_INTERNAL = 901

LAST_SCAN_ACTIVE = "active"
LAST_SCAN_NONE = "none"
LAST_SCAN_FORMAT = "%Y-%m-%dT%H:%M:%S"

REQUEST_TIMEOUT = 10
