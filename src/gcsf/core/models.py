"""Core dataclasses describing a parsed spec document and its resolved cases."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

COMPARE_MODES = ("strict", "deep", "approx")
DEFAULT_COMPARE = "strict"


class _Missing:
    """Marker for a key that was absent from the source document."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def is_missing(value: Any) -> bool:
    return value is MISSING


@dataclass(frozen=True)
class Tolerance:
    """Structured tolerance: optional absolute/relative bounds plus per-field overrides."""

    abs: Optional[float] = None
    rel: Optional[float] = None
    fields: Mapping[str, "ToleranceSpec"] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Tolerance":
        fields = {
            str(key): tolerance_from_raw(value) for key, value in (data.get("fields") or {}).items()
        }
        abs_value = data.get("abs")
        rel_value = data.get("rel")
        return cls(
            abs=float(abs_value) if abs_value is not None else None,
            rel=float(rel_value) if rel_value is not None else None,
            fields=fields,
        )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "fields", {str(key): tolerance_from_raw(value) for key, value in self.fields.items()}
        )

    def for_field(self, key: str) -> "ToleranceSpec":
        return self.fields.get(key, self)


ToleranceSpec = Union[float, Tolerance]


def tolerance_from_raw(raw: Any) -> Any:
    """Convert a raw document value into a ``ToleranceSpec``; absence and null pass through."""

    if raw is MISSING or raw is None:
        return raw
    if isinstance(raw, Tolerance):
        return raw
    if isinstance(raw, Mapping):
        return Tolerance.from_mapping(raw)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"tolerance must be a number or mapping, got {raw!r}")
    return float(raw)


@dataclass(frozen=True)
class Defaults:
    compare: Any = MISSING
    tolerance: Any = MISSING

    def __post_init__(self) -> None:
        object.__setattr__(self, "tolerance", tolerance_from_raw(self.tolerance))

    def overlay(self, other: Optional["Defaults"]) -> "Defaults":
        """Return these defaults overridden key by key with ``other``'s present keys."""

        if other is None:
            return self
        return Defaults(
            compare=self.compare if other.compare is MISSING else other.compare,
            tolerance=self.tolerance if other.tolerance is MISSING else other.tolerance,
        )


@dataclass(frozen=True)
class TestCase:
    """A single fixed input/expected pair declared inside a group."""

    __test__ = False  # keep pytest from collecting this class

    id: str
    op: str
    input: Any
    expected: Any
    kind: Any = MISSING
    description: Any = MISSING
    compare: Any = MISSING
    tolerance: Any = MISSING
    xfail: bool = False
    skip: Any = MISSING
    meta: Any = MISSING

    def __post_init__(self) -> None:
        object.__setattr__(self, "tolerance", tolerance_from_raw(self.tolerance))


@dataclass(frozen=True)
class Group:
    name: str
    description: Any = MISSING
    defaults: Optional[Defaults] = None
    groups: Tuple["Group", ...] = tuple()
    tests: Tuple[TestCase, ...] = tuple()


@dataclass(frozen=True)
class Specification:
    name: str
    version: str
    groups: Tuple[Group, ...]
    schema: Any = MISSING
    capabilities: Tuple[str, ...] = tuple()
    defaults: Defaults = field(default_factory=Defaults)


@dataclass(frozen=True)
class ResolvedCase:
    """A test case after default inheritance has been applied."""

    case: TestCase
    group_path: Tuple[str, ...]
    effective_compare: str
    effective_tolerance: Any = MISSING

    def __post_init__(self) -> None:
        object.__setattr__(self, "effective_tolerance", tolerance_from_raw(self.effective_tolerance))

    @property
    def path(self) -> Tuple[str, ...]:
        return self.group_path + (self.case.id,)

    def identifier(self, separator: str = "/") -> str:
        return separator.join(self.path)

    @property
    def has_tolerance(self) -> bool:
        return self.effective_tolerance is not MISSING and self.effective_tolerance is not None
