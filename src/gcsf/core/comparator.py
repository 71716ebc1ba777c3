"""Equality semantics used to judge implementation output against expectations.

Three modes are supported:

``strict``
    Canonical JSON text equality. Object key order is significant.
``deep``
    Structural equality. Object key order is ignored, sequences are compared
    element-wise and scalars must share a type family (booleans are never
    numbers).
``approx``
    ``deep`` with numeric leaves compared under a tolerance. A plain number is
    an absolute bound applied everywhere. A structured :class:`Tolerance`
    resolves per object field through ``fields`` and accepts a numeric pair
    when any of its present bounds holds.
"""
from __future__ import annotations

import json
import math
from fractions import Fraction
from typing import Any, Mapping

from .models import COMPARE_MODES, Tolerance, ToleranceSpec


def compare(actual: Any, expected: Any, mode: str, tolerance: ToleranceSpec | None = None) -> bool:
    if mode == "strict":
        return canonical_json(actual) == canonical_json(expected)
    if mode == "deep":
        return deep_equal(actual, expected)
    if mode == "approx":
        if tolerance is None:
            raise ValueError('compare="approx" requires a tolerance')
        return approx_equal(actual, expected, tolerance)
    raise ValueError(f"Unknown compare mode '{mode}' (expected one of {', '.join(COMPARE_MODES)})")


def canonical_json(value: Any) -> str:
    """Compact JSON text; integral floats render like integers (``5.0`` -> ``5``).

    Raises ``TypeError`` for values JSON cannot represent.
    """

    return json.dumps(_canonical(value), separators=(",", ":"), ensure_ascii=False)


def _canonical(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {key: _canonical(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(item) for item in value]
    return value


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _family(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def deep_equal(a: Any, b: Any) -> bool:
    family = _family(a)
    if family != _family(b):
        return False
    if family == "object":
        if set(a.keys()) != set(b.keys()):
            return False
        return all(deep_equal(a[key], b[key]) for key in a)
    if family == "array":
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    return a == b


def approx_equal(a: Any, b: Any, tolerance: ToleranceSpec) -> bool:
    if is_number(a) and is_number(b):
        return within_tolerance(a, b, tolerance)
    family = _family(a)
    if family != _family(b):
        return False
    if family == "object":
        if set(a.keys()) != set(b.keys()):
            return False
        for key in a:
            field_tolerance = tolerance.for_field(str(key)) if isinstance(tolerance, Tolerance) else tolerance
            if not approx_equal(a[key], b[key], field_tolerance):
                return False
        return True
    if family == "array":
        if len(a) != len(b):
            return False
        return all(approx_equal(x, y, tolerance) for x, y in zip(a, b))
    return deep_equal(a, b)


def within_tolerance(a: float, b: float, tolerance: ToleranceSpec) -> bool:
    """Check one numeric pair; structured bounds are each sufficient on their own."""

    if not isinstance(tolerance, Tolerance):
        return _difference(a, b) <= tolerance
    if tolerance.abs is None and tolerance.rel is None:
        return True
    diff = _difference(a, b)
    if tolerance.abs is not None and diff <= tolerance.abs:
        return True
    if tolerance.rel is not None and diff <= _scaled(b, tolerance.rel):
        return True
    return False


def _difference(a: float, b: float) -> Any:
    # Integers beyond float range overflow when mixed with floats; fall back to exact rationals.
    try:
        return abs(a - b)
    except OverflowError:
        if not (_is_finite(a) and _is_finite(b)):
            return math.inf
        return abs(Fraction(a) - Fraction(b))


def _scaled(value: float, factor: float) -> Any:
    try:
        return abs(value) * factor
    except OverflowError:
        return abs(Fraction(value)) * Fraction(factor)


def _is_finite(value: float) -> bool:
    return isinstance(value, int) or math.isfinite(value)
