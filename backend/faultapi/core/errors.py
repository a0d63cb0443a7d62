"""Error Hierarchy — typed, categorized exceptions for all emulator failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Payload errors (422) and lookup errors (404) are client errors, never fatal
    - Definition errors (500) only happen while loading resource configuration
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EmulatorError base: FastAPI global handler catches all
    - One subclass per IssueCategory that can raise, so callers and tests can
      tell which check fired without parsing messages
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: str | None = None
    field_name: str | None = None
    debug_info: dict[str, Any] | None = None


class EmulatorError(Exception):
    """Base exception for all emulator errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource": self.context.resource,
                    "record_id": self.context.record_id,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Payload Errors (422) ───────────────────────────────────────

class PayloadError(EmulatorError):
    """Common base for everything that rejects a request body."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )


class InvalidPayloadError(PayloadError):
    """Request body could not be decoded as JSON."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Payload is not valid JSON", "INVALID_PAYLOAD", context)


class UnexpectedRootNodeError(PayloadError):
    """Decoded payload root is not a JSON object."""
    def __init__(self, root_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Payload root must be an object, got {root_type}",
            "UNEXPECTED_PAYLOAD_ROOT_NODE", context,
        )
        self.root_type = root_type


class PayloadMissingKeysError(PayloadError):
    """Payload carries fewer keys than the schema declares."""
    def __init__(self, found: int, expected: int, context: ErrorContext | None = None):
        super().__init__(
            f"Payload has {found} key(s), schema requires {expected}",
            "PAYLOAD_MISSING_KEYS", context,
        )
        self.found = found
        self.expected = expected


class PayloadExtraKeysError(PayloadError):
    """Payload carries more keys than the schema declares."""
    def __init__(self, found: int, expected: int, context: ErrorContext | None = None):
        super().__init__(
            f"Payload has {found} key(s), schema allows {expected}",
            "PAYLOAD_EXTRA_KEYS", context,
        )
        self.found = found
        self.expected = expected


class PayloadWrongDataTypesError(PayloadError):
    """A payload field does not match its declared type."""
    def __init__(self, field_name: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            f"Field '{field_name}' has the wrong data type" if field_name
            else "Payload field has the wrong data type",
            "PAYLOAD_WRONG_DATA_TYPES", ctx,
        )


class PayloadRejectedError(PayloadError):
    """Pipeline refused the payload without a more specific error being enabled."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Payload rejected: {reason}", "PAYLOAD_REJECTED", context,
        )
        self.reason = reason


# ─── Lookup Errors (404) ────────────────────────────────────────

class ResourceNotFoundError(EmulatorError):
    """Requested record does not exist or its id is not an integer."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.record_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Configuration Errors (500) ─────────────────────────────────

class SchemaDefinitionError(EmulatorError):
    """Resource definition could not be compiled into a schema."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid resource definition: {message}",
            "SCHEMA_DEFINITION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
