"""Field Validator — per-field type checks and whole-payload validity.

Invariants:
    - validate_field never raises: unknown fields and failed checks are False
    - create mode requires exactly len(schema) keys; update mode requires at least one
    - The aggregate is the AND of every per-field result, computed the same way
      whether or not the wrong-data-types check is enabled

Design Decisions:
    - The injector is consulted once per field, in payload order, so the first
      badly typed field is the one reported when the check is enabled
"""

from collections.abc import Mapping
from typing import Any

from faultapi.core.domain_types import Payload, ValidationMode
from faultapi.core.fault_injector import FaultInjector
from faultapi.core.resource_schema import FieldDescriptor


def validate_field(name: str, value: Any, schema: Mapping[str, FieldDescriptor]) -> bool:
    """True if value satisfies the type declared for name."""
    descriptor = schema.get(name)
    if descriptor is None:
        return False
    try:
        return descriptor.check(value)
    except (TypeError, ValueError):
        return False


def validate_fields(
    payload: Payload,
    schema: Mapping[str, FieldDescriptor],
    injector: FaultInjector,
) -> dict[str, bool]:
    """Per-field results; raises PayloadWrongDataTypesError if enabled."""
    results: dict[str, bool] = {}
    for name, value in payload.items():
        results[name] = validate_field(name, value, schema)
        injector.wrong_data_type(results[name], name)
    return results


def is_valid_payload(
    payload: Payload,
    schema: Mapping[str, FieldDescriptor],
    injector: FaultInjector,
    mode: ValidationMode = ValidationMode.CREATE,
) -> bool:
    if mode == ValidationMode.CREATE:
        if len(payload) != len(schema):
            return False
    elif len(payload) == 0:
        return False

    return all(validate_fields(payload, schema, injector).values())
