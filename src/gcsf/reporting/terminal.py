"""Terminal reporter rendering one line per verdict and a summary."""
from __future__ import annotations

from typing import Sequence

import click
from colorama import Fore, Style, init as colorama_init

from gcsf.core.models import Specification
from gcsf.core.results import Status, Verdict, overall_success

from .base import Reporter

STATUS_COLORS = {
    Status.PASS: Fore.GREEN,
    Status.FAIL: Fore.RED,
    Status.SKIP: Fore.CYAN,
    Status.ERROR: Fore.YELLOW,
}

STATUS_ICONS = {
    Status.PASS: "✓",
    Status.FAIL: "✗",
    Status.SKIP: "○",
    Status.ERROR: "⚠",
}

PATH_SEPARATOR = " › "
RULE = "=" * 60


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        if use_color:
            colorama_init()

    def on_start(self, spec: Specification, total: int) -> None:
        click.echo(f"Running {spec.name} v{spec.version}: {total} case(s)")
        click.echo(RULE)

    def on_case_result(self, verdict: Verdict, index: int, total: int) -> None:
        status = verdict.status
        label = self._styled(f"{STATUS_ICONS[status]} {status.value:<5}", STATUS_COLORS[status])
        click.echo(f"{label} {verdict.case.identifier(PATH_SEPARATOR)}")
        if verdict.message:
            click.echo(f"  {verdict.message}")

    def on_complete(self, verdicts: Sequence[Verdict]) -> None:
        counts = {status: sum(1 for v in verdicts if v.status == status) for status in Status}
        color = Fore.GREEN if overall_success(verdicts) else Fore.RED
        click.echo(RULE)
        click.echo(
            self._styled(
                f"Total: {len(verdicts)} | Pass: {counts[Status.PASS]} | Fail: {counts[Status.FAIL]} "
                f"| Skip: {counts[Status.SKIP]} | Error: {counts[Status.ERROR]}",
                color,
            )
        )

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"
