"""Reporter interface definitions."""
from __future__ import annotations

from typing import List, Sequence

from gcsf.core.models import Specification
from gcsf.core.results import Verdict


class Reporter:
    """Interface for output renderers."""

    def on_start(self, spec: Specification, total: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_result(self, verdict: Verdict, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, verdicts: Sequence[Verdict]) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def start(self, spec: Specification, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_start(spec, total)

    def handle_result(self, verdict: Verdict, index: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_case_result(verdict, index, total)

    def complete(self, verdicts: Sequence[Verdict]) -> None:
        for reporter in self._reporters:
            reporter.on_complete(verdicts)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
