"""Result data structures produced by the evaluator and runner."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .models import MISSING, ResolvedCase


class Status(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    SKIP = "SKIP"
    ERROR = "ERROR"


class ErrorKind(str, Enum):
    MISSING_OPERATION = "MissingOperation"
    INVOCATION_FAILURE = "InvocationFailure"
    FORBIDDEN_SPECIAL_VALUE = "ForbiddenSpecialValue"
    TOLERANCE_REQUIRED = "ToleranceRequired"
    COMPARISON_FAILURE = "ComparisonFailure"


@dataclass(frozen=True)
class Verdict:
    """Terminal outcome of evaluating one resolved case."""

    case: ResolvedCase
    status: Status
    message: Optional[str] = None
    actual: Any = MISSING
    error_kind: Optional[ErrorKind] = None

    @property
    def has_actual(self) -> bool:
        return self.actual is not MISSING

    @property
    def ok(self) -> bool:
        return self.status in (Status.PASS, Status.SKIP)


@dataclass
class RunReport:
    """Ordered verdicts of a run plus aggregate counts."""

    verdicts: List[Verdict] = field(default_factory=list)

    def count(self, status: Status) -> int:
        return sum(1 for verdict in self.verdicts if verdict.status == status)

    def counts(self) -> Dict[str, int]:
        return {status.value: self.count(status) for status in Status}

    @property
    def total(self) -> int:
        return len(self.verdicts)

    @property
    def success(self) -> bool:
        return overall_success(self.verdicts)


def overall_success(verdicts: Sequence[Verdict]) -> bool:
    """True when no verdict is FAIL or ERROR; skipped cases do not count against a run."""

    return all(verdict.ok for verdict in verdicts)
