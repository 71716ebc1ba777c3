"""Run a loaded spec against an implementation and report the verdicts."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import click

from gcsf.core import ConformanceRunner, ResolvedCase, RunReport, Specification, flatten_spec, select_cases
from gcsf.core.evaluator import OperationMap
from gcsf.registry import OperationRegistry, load_implementation, registry
from gcsf.reporting import JsonReporter, ReportManager, Reporter, TerminalReporter


@dataclass(frozen=True)
class RunOptions:
    select: Sequence[str] = field(default_factory=tuple)
    report_format: str = "terminal"
    report_path: Optional[str] = None
    use_color: bool = True
    list_only: bool = False


def build_operations(implementation: Optional[str]) -> OperationRegistry:
    """Plugin-registered operations overlaid with those of ``implementation``."""

    if not implementation:
        return OperationRegistry(registry)
    return registry.merged(load_implementation(implementation))


def build_reporters(options: RunOptions) -> List[Reporter]:
    if options.report_format == "json":
        if not options.report_path:
            raise ValueError("--report json requires --report-path")
        return [JsonReporter(options.report_path)]
    return [TerminalReporter(use_color=options.use_color)]


def run_spec(spec: Specification, operations: OperationMap, options: RunOptions) -> int:
    """Execute the spec; returns process exit code (0 success, 1 failures or errors)."""

    cases = select_cases(flatten_spec(spec), options.select)
    if options.list_only:
        for case in cases:
            click.echo(case.identifier())
        return 0
    report = execute(spec, cases, operations, build_reporters(options))
    return 0 if report.success else 1


def execute(
    spec: Specification,
    cases: Sequence[ResolvedCase],
    operations: OperationMap,
    reporters: Sequence[Reporter],
) -> RunReport:
    manager = ReportManager(reporters)
    manager.start(spec, len(cases))
    report = ConformanceRunner(operations).run(cases, on_result=manager.handle_result)
    manager.complete(report.verdicts)
    return report
