"""Schema Sanitizer — restricts a payload to the keys its schema declares.

Invariants:
    - keys(result) ⊆ keys(schema)
    - The input payload is never mutated (result is a deep copy)
    - Missing-key check runs twice: before stripping and again on the result,
      since dropping unknown keys can expose a shortfall
    - Missing and extra key checks are independent; both may be enabled

Design Decisions:
    - Key counts, not key sets, drive the missing/extra checks: a payload with
      one wrong key and one missing key has the right count and passes both
"""

import copy
from collections.abc import Mapping
from typing import Any

from faultapi.core.domain_types import Payload
from faultapi.core.fault_injector import FaultInjector


def sanitize_payload(
    payload: Payload, schema: Mapping[str, Any], injector: FaultInjector,
) -> Payload:
    """Return a deep copy of payload holding only schema-declared keys."""
    injector.missing_keys(payload, schema)
    injector.extra_keys(payload, schema)

    sanitized = {
        name: copy.deepcopy(value)
        for name, value in payload.items()
        if name in schema
    }

    injector.missing_keys(sanitized, schema)
    return sanitized
