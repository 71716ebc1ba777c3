"""Spec document loading and validation."""

from .loader import SpecError, load_spec, parse_spec, validate_spec
from .schema import SPEC_SCHEMA

__all__ = [
    "SPEC_SCHEMA",
    "SpecError",
    "load_spec",
    "parse_spec",
    "validate_spec",
]
