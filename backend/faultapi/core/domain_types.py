"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps int — store keys are never raw strings
    - Every fault category and field type is an Enum member (no raw string matching)
    - IssueCategory values are the exact tags accepted in configuration

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (health endpoint, logs)
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)


# ─── Value Types ─────────────────────────────────────────────────

Payload = dict[str, Any]
Record = dict[str, Any]

RECORD_ID_FIELD = "id"


# ─── Enums ───────────────────────────────────────────────────────

class IssueCategory(str, Enum):
    """Fault categories. Enabled ones are enforced, the rest are silently skipped."""
    INVALID_PAYLOAD = "invalid_payload"
    UNEXPECTED_PAYLOAD_ROOT_NODE = "unexpected_payload_root_node"
    PAYLOAD_MISSING_KEYS = "payload_missing_keys"
    PAYLOAD_EXTRA_KEYS = "payload_extra_keys"
    PAYLOAD_WRONG_DATA_TYPES = "payload_wrong_data_types"
    BROKEN_RECORD_DELETION = "broken_record_deletion"


class FieldType(str, Enum):
    """Declared field types a resource schema may use."""
    INTEGER = "integer"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class ValidationMode(str, Enum):
    """create requires every schema field; update accepts any non-empty subset."""
    CREATE = "create"
    UPDATE = "update"
