"""JSON reporter emitting structured verdicts."""
from __future__ import annotations

import datetime as dt
import json
import math
import pathlib
from typing import Any, Dict, Sequence

import click
from jsonschema import validate

from gcsf.core.models import Specification
from gcsf.core.results import Status, Verdict, overall_success

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes verdicts to a JSON file validated against the schema."""

    def __init__(self, path: str) -> None:
        self._path = pathlib.Path(path)
        self._records: list[Dict[str, Any]] = []
        self._spec: Specification | None = None

    def on_start(self, spec: Specification, total: int) -> None:
        self._spec = spec
        self._records.clear()

    def on_case_result(self, verdict: Verdict, index: int, total: int) -> None:
        self._records.append(_verdict_to_dict(verdict))

    def on_complete(self, verdicts: Sequence[Verdict]) -> None:
        if self._spec is None:
            return
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
            "spec": {"name": self._spec.name, "version": self._spec.version},
            "summary": _build_summary(verdicts),
            "cases": self._records,
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def _build_summary(verdicts: Sequence[Verdict]) -> Dict[str, Any]:
    def count(status: Status) -> int:
        return sum(1 for verdict in verdicts if verdict.status == status)

    return {
        "total": len(verdicts),
        "passed": count(Status.PASS),
        "failed": count(Status.FAIL),
        "skipped": count(Status.SKIP),
        "errors": count(Status.ERROR),
        "success": overall_success(verdicts),
    }


def _verdict_to_dict(verdict: Verdict) -> Dict[str, Any]:
    resolved = verdict.case
    record: Dict[str, Any] = {
        "id": resolved.case.id,
        "path": list(resolved.path),
        "op": resolved.case.op,
        "status": verdict.status.value,
        "compare": resolved.effective_compare,
        "xfail": resolved.case.xfail,
    }
    if verdict.message:
        record["message"] = verdict.message
    if verdict.error_kind is not None:
        record["error_kind"] = verdict.error_kind.value
    if verdict.has_actual:
        record["actual"] = _jsonify(verdict.actual)
    return record


def _jsonify(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _jsonify(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonify(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)
