"""Core models and engine exposed at the package level."""
from .comparator import compare
from .evaluator import evaluate
from .flattener import flatten, flatten_spec
from .models import MISSING, Defaults, Group, ResolvedCase, Specification, TestCase, Tolerance
from .results import ErrorKind, RunReport, Status, Verdict, overall_success
from .runner import ConformanceRunner, select_cases

__all__ = [
    "MISSING",
    "ConformanceRunner",
    "Defaults",
    "ErrorKind",
    "Group",
    "ResolvedCase",
    "RunReport",
    "Specification",
    "Status",
    "TestCase",
    "Tolerance",
    "Verdict",
    "compare",
    "evaluate",
    "flatten",
    "flatten_spec",
    "overall_success",
    "select_cases",
]
