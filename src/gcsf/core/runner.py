"""Sequential runner tying the flattener and evaluator together."""
from __future__ import annotations

import fnmatch
import logging
from typing import Callable, List, Optional, Sequence, Union

from .evaluator import OperationMap, evaluate
from .flattener import flatten_spec
from .models import ResolvedCase, Specification
from .results import RunReport, Verdict

logger = logging.getLogger(__name__)


class ConformanceRunner:
    """Evaluates resolved cases strictly in order, one at a time."""

    def __init__(self, operations: OperationMap) -> None:
        self._operations = operations

    def run(
        self,
        source: Union[Specification, Sequence[ResolvedCase]],
        *,
        on_result: Optional[Callable[[Verdict, int, int], None]] = None,
    ) -> RunReport:
        cases = flatten_spec(source) if isinstance(source, Specification) else list(source)
        report = RunReport()
        total = len(cases)
        for index, case in enumerate(cases, start=1):
            verdict = evaluate(case, self._operations)
            report.verdicts.append(verdict)
            if on_result:
                on_result(verdict, index, total)
        logger.debug("run finished: %s", report.counts())
        return report


def select_cases(cases: Sequence[ResolvedCase], patterns: Sequence[str]) -> List[ResolvedCase]:
    """Keep cases whose ``group/.../id`` path matches any glob pattern."""

    if not patterns:
        return list(cases)
    return [
        case
        for case in cases
        if any(fnmatch.fnmatchcase(case.identifier(), pattern) for pattern in patterns)
    ]
