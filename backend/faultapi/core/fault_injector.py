"""Fault Injector — policy gate deciding which validation failures are actually raised.

Invariants:
    - Enabled categories are fixed at construction (process-wide, never mutated)
    - check() raises only when the category is enabled AND its condition holds
    - A disabled category never raises: the caller continues as if the check passed
    - broken_record_deletion is a pure query, it has no error to raise

Design Decisions:
    - Policy table (category -> error class) behind one check() entry point,
      not a conditional per call site
    - Named gate methods wrap check() so call sites read like the rule they apply
    - Suppressed checks are logged so an injected bug is visible in the logs
      while staying invisible to the client
"""

import logging
from collections.abc import Iterable, Sized

from faultapi.core.domain_types import IssueCategory
from faultapi.core.errors import (
    EmulatorError,
    InvalidPayloadError,
    UnexpectedRootNodeError,
    PayloadMissingKeysError,
    PayloadExtraKeysError,
    PayloadWrongDataTypesError,
)

logger = logging.getLogger(__name__)

_ISSUE_ERRORS: dict[IssueCategory, type[EmulatorError]] = {
    IssueCategory.INVALID_PAYLOAD: InvalidPayloadError,
    IssueCategory.UNEXPECTED_PAYLOAD_ROOT_NODE: UnexpectedRootNodeError,
    IssueCategory.PAYLOAD_MISSING_KEYS: PayloadMissingKeysError,
    IssueCategory.PAYLOAD_EXTRA_KEYS: PayloadExtraKeysError,
    IssueCategory.PAYLOAD_WRONG_DATA_TYPES: PayloadWrongDataTypesError,
}


class FaultInjector:
    """Holds the enabled issue categories and enforces them at each checkpoint."""

    def __init__(self, enabled_issues: Iterable[IssueCategory | str] = ()):
        self._enabled = frozenset(IssueCategory(i) for i in enabled_issues)

    @property
    def enabled_issues(self) -> frozenset[IssueCategory]:
        return self._enabled

    def is_enabled(self, category: IssueCategory) -> bool:
        return category in self._enabled

    def check(self, category: IssueCategory, condition: bool, **details) -> None:
        """Raise the category's error if it is enabled and condition holds."""
        if category not in _ISSUE_ERRORS:
            raise ValueError(f"{category.value} has no error to raise")
        if not condition:
            return
        if category not in self._enabled:
            logger.info(
                f"Issue injected: {category.value} check skipped",
                extra={"issue": category.value, **details},
            )
            return
        raise _ISSUE_ERRORS[category](**details)

    # ─── Named gates ────────────────────────────────────────────

    def invalid_payload(self) -> None:
        """Decode failure is always the triggering condition."""
        self.check(IssueCategory.INVALID_PAYLOAD, True)

    def unexpected_root_node(self, unexpected: bool, root_type: str = "value") -> None:
        self.check(
            IssueCategory.UNEXPECTED_PAYLOAD_ROOT_NODE, unexpected,
            root_type=root_type,
        )

    def missing_keys(self, payload: Sized, schema: Sized) -> None:
        self.check(
            IssueCategory.PAYLOAD_MISSING_KEYS, len(payload) < len(schema),
            found=len(payload), expected=len(schema),
        )

    def extra_keys(self, payload: Sized, schema: Sized) -> None:
        self.check(
            IssueCategory.PAYLOAD_EXTRA_KEYS, len(payload) > len(schema),
            found=len(payload), expected=len(schema),
        )

    def wrong_data_type(self, valid: bool, field_name: str | None = None) -> None:
        self.check(
            IssueCategory.PAYLOAD_WRONG_DATA_TYPES, not valid,
            field_name=field_name,
        )

    def record_deletion_broken(self) -> bool:
        """True when deletes must report success without removing anything."""
        return self.is_enabled(IssueCategory.BROKEN_RECORD_DELETION)
