"""Resolve a group tree into an ordered list of executable cases."""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from .models import DEFAULT_COMPARE, MISSING, Defaults, Group, ResolvedCase, Specification, TestCase

logger = logging.getLogger(__name__)


def flatten_spec(spec: Specification) -> List[ResolvedCase]:
    cases = flatten(spec.groups, (), spec.defaults)
    logger.debug("flattened spec %s: %d case(s)", spec.name, len(cases))
    return cases


def flatten(
    groups: Sequence[Group],
    ancestor_path: Sequence[str] = (),
    inherited: Optional[Defaults] = None,
) -> List[ResolvedCase]:
    """Depth-first flatten; nested groups are emitted before a group's own tests."""

    inherited = inherited or Defaults()
    resolved: List[ResolvedCase] = []
    for group in groups:
        path = tuple(ancestor_path) + (group.name,)
        merged = inherited.overlay(group.defaults)
        if group.groups:
            resolved.extend(flatten(group.groups, path, merged))
        for case in group.tests:
            resolved.append(resolve_case(case, path, merged))
    return resolved


def resolve_case(case: TestCase, group_path: Sequence[str], defaults: Defaults) -> ResolvedCase:
    return ResolvedCase(
        case=case,
        group_path=tuple(group_path),
        effective_compare=_first_set(case.compare, defaults.compare) or DEFAULT_COMPARE,
        effective_tolerance=defaults.tolerance if case.tolerance is MISSING else case.tolerance,
    )


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not MISSING and value is not None:
            return value
    return None
