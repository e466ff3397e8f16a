from taskdesk.infrastructure.bridge.codecs import DateTimeCodec, RFC3339Codec
from taskdesk.infrastructure.bridge.hydrator import create_from, hydrate
from taskdesk.infrastructure.bridge.key_adapter import canonicalize_keys
from taskdesk.infrastructure.bridge.mappers import BridgeMapper
from taskdesk.infrastructure.bridge.outputs import (
    CreateTaskOutput,
    GetDashboardOutput,
    GetTaskOutput,
    ListTasksOutput,
    WireTask,
)
from taskdesk.infrastructure.bridge.shapes import OPAQUE, OpaqueField
from taskdesk.infrastructure.bridge.validation import validate_payload

__all__ = [
    "hydrate",
    "create_from",
    "OPAQUE",
    "OpaqueField",
    "WireTask",
    "CreateTaskOutput",
    "GetTaskOutput",
    "ListTasksOutput",
    "GetDashboardOutput",
    "DateTimeCodec",
    "RFC3339Codec",
    "BridgeMapper",
    "canonicalize_keys",
    "validate_payload",
]
