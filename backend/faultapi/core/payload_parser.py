"""Payload Parser — decodes raw request bytes and classifies the root shape.

Invariants:
    - Decode failure is terminal: InvalidPayloadError when enabled, else (False, {})
    - A decoded non-object root is passed through as accepted unless the
      unexpected_payload_root_node check is enabled (later stages then fail on it)
    - NaN / Infinity literals and numbers that overflow to infinity are
      rejected like any other malformed JSON
    - Nesting deeper than MAX_NESTING arrays/objects is a decode failure

Design Decisions:
    - Returns (accepted, payload) instead of raising for the "not acceptable"
      case: the injector is the only place that decides whether to raise
    - Nesting measured after decoding with an explicit stack; decoder
      recursion overflow counts as the same failure
"""

import json
import math
from typing import Any

from faultapi.core.fault_injector import FaultInjector

MAX_NESTING = 100


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def _nesting_depth(value: Any) -> int:
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def _describe_root(value: Any) -> str:
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


def decode_json(raw: bytes | str) -> Any:
    """Strict decode; raises ValueError on anything the parser must refuse."""
    try:
        payload = json.loads(
            raw, parse_constant=_reject_constant, parse_float=_finite_float,
        )
    except RecursionError:
        raise ValueError("payload nesting too deep") from None
    if _nesting_depth(payload) > MAX_NESTING:
        raise ValueError(f"payload nesting exceeds {MAX_NESTING}")
    return payload


def parse_payload(raw: bytes | str, injector: FaultInjector) -> tuple[bool, Any]:
    """Decode raw JSON. Returns (accepted, decoded value)."""
    try:
        payload = decode_json(raw)
    except ValueError:
        # JSONDecodeError and UnicodeDecodeError are both ValueError
        injector.invalid_payload()
        return False, {}

    injector.unexpected_root_node(
        not isinstance(payload, dict), _describe_root(payload),
    )
    return True, payload
