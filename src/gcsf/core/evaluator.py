"""Judge a single resolved case against an operation registry."""
from __future__ import annotations

import asyncio
import inspect
import json
import logging
import math
from typing import Any, Callable, Mapping

import numpy as np

from .comparator import compare
from .models import MISSING, ResolvedCase
from .results import ErrorKind, Status, Verdict

logger = logging.getLogger(__name__)

OperationMap = Mapping[str, Callable[[Any], Any]]

SPECIAL_VALUE_MESSAGE = "Implementation returned NaN or Infinity (forbidden special value)"
TOLERANCE_REQUIRED_MESSAGE = 'compare="approx" requires tolerance to be set'


def evaluate(resolved: ResolvedCase, operations: OperationMap) -> Verdict:
    """Produce exactly one verdict; per-case problems never raise."""

    verdict = _evaluate(resolved, operations)
    logger.debug("%s -> %s", resolved.identifier(), verdict.status.value)
    return verdict


def _evaluate(resolved: ResolvedCase, operations: OperationMap) -> Verdict:
    case = resolved.case
    if isinstance(case.skip, str):
        return Verdict(case=resolved, status=Status.SKIP, message=case.skip)

    func = operations.get(case.op)
    if func is None:
        return _error(
            resolved,
            ErrorKind.MISSING_OPERATION,
            f"Operation '{case.op}' not found in implementation",
        )

    try:
        actual = normalize_value(invoke(func, case.input))
    except Exception as exc:
        return _error(resolved, ErrorKind.INVOCATION_FAILURE, f"Exception: {_describe_exception(exc)}")

    if has_special_values(actual):
        return _error(resolved, ErrorKind.FORBIDDEN_SPECIAL_VALUE, SPECIAL_VALUE_MESSAGE, actual)

    if resolved.effective_compare == "approx" and not resolved.has_tolerance:
        return _error(resolved, ErrorKind.TOLERANCE_REQUIRED, TOLERANCE_REQUIRED_MESSAGE, actual)

    tolerance = resolved.effective_tolerance if resolved.has_tolerance else None
    try:
        matches = compare(actual, case.expected, resolved.effective_compare, tolerance)
    except Exception as exc:
        logger.debug("comparison raised for %s", resolved.identifier(), exc_info=True)
        return _error(
            resolved,
            ErrorKind.COMPARISON_FAILURE,
            f"Comparison failed: {_describe_exception(exc)}",
            actual,
        )
    passed = not matches if case.xfail else matches
    if passed:
        return Verdict(case=resolved, status=Status.PASS, actual=actual)
    message = f"Expected {format_value(case.expected)}, got {format_value(actual)}"
    if case.xfail:
        message += " (marked xfail but matched)"
    return Verdict(case=resolved, status=Status.FAIL, message=message, actual=actual)


def invoke(func: Callable[[Any], Any], value: Any) -> Any:
    """Call an operation, driving coroutine results to completion."""

    result = func(value)
    if inspect.isawaitable(result):
        result = asyncio.run(_await(result))
    return result


async def _await(awaitable: Any) -> Any:
    return await awaitable


def normalize_value(value: Any) -> Any:
    """Convert numpy arrays/scalars and tuples into plain JSON-like values."""

    if isinstance(value, np.ndarray):
        return normalize_value(value.tolist())
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, Mapping):
        return {key: normalize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_value(item) for item in value]
    return value


def has_special_values(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, Mapping):
        return any(has_special_values(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return any(has_special_values(item) for item in value)
    return False


def format_value(value: Any) -> str:
    """Render a value for messages; never raises."""

    return json.dumps(_displayable(value), default=repr, ensure_ascii=False)


def _displayable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key if isinstance(key, str) else repr(key): _displayable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_displayable(item) for item in value]
    return value


def _describe_exception(exc: Exception) -> str:
    text = str(exc)
    return text if text else type(exc).__name__


def _error(resolved: ResolvedCase, kind: ErrorKind, message: str, actual: Any = MISSING) -> Verdict:
    return Verdict(case=resolved, status=Status.ERROR, message=message, actual=actual, error_kind=kind)
