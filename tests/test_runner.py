from __future__ import annotations

from gcsf.core import (
    ConformanceRunner,
    Defaults,
    ErrorKind,
    Group,
    Specification,
    Status,
    TestCase,
    Tolerance,
    flatten_spec,
    overall_success,
    select_cases,
)


def _spec() -> Specification:
    return Specification(
        name="math",
        version="1.0",
        defaults=Defaults(compare="deep"),
        groups=(
            Group(
                name="arith",
                groups=(
                    Group(
                        name="add",
                        tests=(
                            TestCase(id="ok", op="add", input={"a": 1, "b": 2}, expected={"result": 3}),
                            TestCase(id="wrong", op="add", input={"a": 1, "b": 2}, expected={"result": 4}),
                        ),
                    ),
                ),
                tests=(
                    TestCase(id="missing", op="mul", input={}, expected={}),
                    TestCase(id="skipped", op="mul", input={}, expected={}, skip="todo"),
                ),
            ),
        ),
    )


OPERATIONS = {"add": lambda data: {"result": data["a"] + data["b"]}}


def test_runner_evaluates_in_order_and_reports_progress() -> None:
    seen = []
    report = ConformanceRunner(OPERATIONS).run(
        _spec(), on_result=lambda verdict, index, total: seen.append((verdict.case.case.id, index, total))
    )
    assert [v.status for v in report.verdicts] == [Status.PASS, Status.FAIL, Status.ERROR, Status.SKIP]
    assert seen == [("ok", 1, 4), ("wrong", 2, 4), ("missing", 3, 4), ("skipped", 4, 4)]
    assert report.counts() == {"PASS": 1, "FAIL": 1, "SKIP": 1, "ERROR": 1}
    assert not report.success


def test_runner_is_deterministic() -> None:
    first = ConformanceRunner(OPERATIONS).run(_spec())
    second = ConformanceRunner(OPERATIONS).run(_spec())
    assert first.verdicts == second.verdicts


def test_skips_do_not_affect_success() -> None:
    cases = select_cases(flatten_spec(_spec()), ["arith/add/ok", "*/skipped"])
    report = ConformanceRunner(OPERATIONS).run(cases)
    assert [v.status for v in report.verdicts] == [Status.PASS, Status.SKIP]
    assert report.success
    assert overall_success([])


def test_select_cases_globs_on_full_path() -> None:
    cases = flatten_spec(_spec())
    assert select_cases(cases, []) == cases
    assert [c.case.id for c in select_cases(cases, ["arith/add/*"])] == ["ok", "wrong"]
    assert select_cases(cases, ["nothing*"]) == []


def test_one_bad_case_never_aborts_the_run() -> None:
    class Opaque:
        pass

    operations = {
        "huge": lambda data: 10**400,
        "pairs": lambda data: {(1, 2): data},
        "opaque": lambda data: Opaque(),
        "echo": lambda data: data,
    }
    spec = Specification(
        name="edge",
        version="1",
        groups=(
            Group(
                name="g",
                tests=(
                    TestCase(id="overflow", op="huge", input=None, expected=1.5, compare="approx", tolerance=0.1),
                    TestCase(id="tuple_keys", op="pairs", input=1, expected={"a": 1}, compare="deep"),
                    TestCase(id="opaque", op="opaque", input=None, expected="x"),
                    TestCase(id="after", op="echo", input=3, expected=3),
                ),
            ),
        ),
    )
    report = ConformanceRunner(operations).run(spec)
    overflow, tuple_keys, opaque, after = report.verdicts
    assert overflow.status == Status.FAIL
    assert overflow.message.startswith("Expected 1.5, got 1000")
    assert tuple_keys.status == Status.FAIL
    assert '"(1, 2)": 1' in tuple_keys.message
    assert opaque.status == Status.ERROR
    assert opaque.error_kind == ErrorKind.COMPARISON_FAILURE
    assert after.status == Status.PASS
    assert report.total == 4


def test_mapping_tolerance_built_in_code_is_usable() -> None:
    spec = Specification(
        name="tol",
        version="1",
        defaults=Defaults(compare="approx", tolerance={"abs": 0.1, "fields": {"loose": 1}}),
        groups=(
            Group(
                name="g",
                tests=(
                    TestCase(id="close", op="echo", input={"v": 1.05, "loose": 2.5}, expected={"v": 1.0, "loose": 2.0}),
                    TestCase(id="far", op="echo", input={"v": 1.5, "loose": 2.0}, expected={"v": 1.0, "loose": 2.0}),
                    TestCase(id="own", op="echo", input=1.4, expected=1.0, tolerance={"rel": 0.5}),
                ),
            ),
        ),
    )
    report = ConformanceRunner({"echo": lambda data: data}).run(spec)
    assert [v.status for v in report.verdicts] == [Status.PASS, Status.FAIL, Status.PASS]
    assert isinstance(report.verdicts[0].case.effective_tolerance, Tolerance)
