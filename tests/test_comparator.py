import pytest

from gcsf.core import Tolerance, compare
from gcsf.core.comparator import canonical_json, deep_equal, within_tolerance


def test_strict_is_key_order_sensitive() -> None:
    assert compare({"a": 1, "b": 2}, {"a": 1, "b": 2}, "strict")
    assert not compare({"b": 2, "a": 1}, {"a": 1, "b": 2}, "strict")


def test_deep_ignores_key_order() -> None:
    assert compare({"b": 2, "a": 1}, {"a": 1, "b": 2}, "deep")


def test_strict_renders_integral_floats_like_integers() -> None:
    assert canonical_json({"result": 5.0}) == '{"result":5}'
    assert compare({"result": 5.0}, {"result": 5}, "strict")
    assert not compare({"ok": True}, {"ok": 1}, "strict")


def test_deep_type_families() -> None:
    assert deep_equal(1, 1.0)
    assert not deep_equal(True, 1)
    assert not deep_equal(None, 0)
    assert not deep_equal("1", 1)
    assert not deep_equal([1, 2], {"0": 1, "1": 2})
    assert deep_equal([1, {"x": [None, "s"]}], (1, {"x": (None, "s")}))


def test_deep_sequences_are_ordered() -> None:
    assert not compare([1, 2], [2, 1], "deep")
    assert not compare([1, 2], [1, 2, 3], "deep")


def test_deep_key_sets_must_match() -> None:
    assert not compare({"a": 1}, {"a": 1, "b": None}, "deep")


def test_approx_number_tolerance_applies_everywhere() -> None:
    actual = {"a": 1.05, "nested": {"values": [2.0, 3.04]}}
    expected = {"a": 1.0, "nested": {"values": [2.0, 3.0]}}
    assert compare(actual, expected, "approx", 0.05 + 1e-9)
    assert not compare(actual, expected, "approx", 0.01)


def test_approx_non_numeric_leaves_use_deep() -> None:
    assert compare({"name": "x", "v": 1.0}, {"v": 1.001, "name": "x"}, "approx", 0.01)
    assert not compare({"name": "y", "v": 1.0}, {"name": "x", "v": 1.0}, "approx", 0.01)
    assert not compare({"flag": True}, {"flag": 1}, "approx", 1.0)


def test_structured_tolerance_either_bound_is_sufficient() -> None:
    tolerance = Tolerance(abs=0.01, rel=0.5)
    # Fails abs, satisfies rel.
    assert within_tolerance(140.0, 100.0, tolerance)
    # Satisfies abs, fails rel (expected is zero).
    assert within_tolerance(0.005, 0.0, tolerance)
    # Violates both.
    assert not within_tolerance(200.0, 100.0, tolerance)


def test_structured_tolerance_single_bounds() -> None:
    assert within_tolerance(1.1, 1.0, Tolerance(abs=0.2))
    assert not within_tolerance(1.3, 1.0, Tolerance(abs=0.2))
    assert within_tolerance(105.0, 100.0, Tolerance(rel=0.05))
    assert not within_tolerance(106.0, 100.0, Tolerance(rel=0.05))


def test_structured_tolerance_without_bounds_accepts_any_pair() -> None:
    assert within_tolerance(2.0, 2.0, Tolerance())
    assert within_tolerance(2.0, 500.0, Tolerance())
    # Field overrides still constrain their own keys.
    tolerance = Tolerance(fields={"x": 0.1})
    assert compare({"x": 1.05, "y": 9.0}, {"x": 1.0, "y": 1.0}, "approx", tolerance)
    assert not compare({"x": 1.5, "y": 1.0}, {"x": 1.0, "y": 1.0}, "approx", tolerance)


def test_tolerance_handles_integers_beyond_float_range() -> None:
    huge = 10**400
    assert not within_tolerance(huge, 1.0, 0.5)
    assert not within_tolerance(1.0, huge, Tolerance(rel=0.1))
    assert within_tolerance(huge + 1, huge, Tolerance(abs=1.0))
    assert within_tolerance(huge + 10, huge, Tolerance(rel=1e-300))
    assert not within_tolerance(huge, float("inf"), Tolerance(abs=1.0))


def test_field_tolerances_override_ambient() -> None:
    tolerance = Tolerance(abs=0.001, fields={"loose": 1.0, "nested": Tolerance(rel=0.1)})
    expected = {"tight": 1.0, "loose": 10.0, "nested": {"inner": 100.0}}
    assert compare({"tight": 1.0005, "loose": 10.9, "nested": {"inner": 109.0}}, expected, "approx", tolerance)
    assert not compare({"tight": 1.01, "loose": 10.9, "nested": {"inner": 109.0}}, expected, "approx", tolerance)
    assert not compare({"tight": 1.0, "loose": 12.0, "nested": {"inner": 100.0}}, expected, "approx", tolerance)
    assert not compare({"tight": 1.0, "loose": 10.0, "nested": {"inner": 120.0}}, expected, "approx", tolerance)


def test_structured_tolerance_applies_inside_sequences() -> None:
    assert compare([1.0, 2.0], [1.001, 2.001], "approx", Tolerance(abs=0.01))
    assert not compare([1.0, 2.0], [1.0], "approx", Tolerance(abs=0.01))


def test_approx_requires_tolerance_and_known_modes() -> None:
    with pytest.raises(ValueError):
        compare(1, 1, "approx")
    with pytest.raises(ValueError):
        compare(1, 1, "fuzzy")


def test_strict_never_matches_objects_against_their_string_form() -> None:
    class Point:
        def __str__(self) -> str:
            return "Point(1, 2)"

    with pytest.raises(TypeError):
        compare({"p": Point()}, {"p": "Point(1, 2)"}, "strict")
    with pytest.raises(TypeError):
        compare({(1, 2): 1}, {"(1, 2)": 1}, "strict")
    assert not compare({"p": "Point(1, 2)"}, {"p": {"x": 1, "y": 2}}, "strict")
