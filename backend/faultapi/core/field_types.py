"""Field Type Checks — one acceptance rule per FieldType member.

Invariants:
    - Every FieldType has exactly one check
    - Checks are PURE and return bool for any decoded JSON value
    - bool is never accepted as integer or number, even though it subclasses int

Design Decisions:
    - Checks accept anything "interpretable as" the type, so numeric strings
      pass integer/number and any non-empty rendering passes string
    - Non-finite floats are rejected: they are not valid JSON numbers
"""

import json
import math
from collections.abc import Callable
from typing import Any

from faultapi.core.domain_types import FieldType

FieldCheck = Callable[[Any], bool]


def _parse_int_text(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        # prefixed literals: 0x1f, 0o17, 0b101
        return int(text.strip(), 0)


def accepts_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            _parse_int_text(value)
        except ValueError:
            return False
        return True
    return False


def accepts_string(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return len(value) > 0
    try:
        return len(json.dumps(value, allow_nan=False)) > 0
    except ValueError:
        # non-finite float somewhere inside
        return False


def accepts_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def accepts_boolean(value: Any) -> bool:
    return value is True or value is False


FIELD_CHECKS: dict[FieldType, FieldCheck] = {
    FieldType.INTEGER: accepts_integer,
    FieldType.STRING: accepts_string,
    FieldType.NUMBER: accepts_number,
    FieldType.BOOLEAN: accepts_boolean,
}


def check_for(field_type: FieldType) -> FieldCheck:
    return FIELD_CHECKS[field_type]
