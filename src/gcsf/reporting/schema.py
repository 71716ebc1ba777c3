"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "gcsf report",
    "type": "object",
    "required": ["schema_version", "generated_at", "spec", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "spec": {
            "type": "object",
            "required": ["name", "version"],
            "properties": {
                "name": {"type": "string"},
                "version": {"type": "string"},
            },
        },
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "skipped", "errors", "success"],
            "properties": {
                "total": {"type": "integer"},
                "passed": {"type": "integer"},
                "failed": {"type": "integer"},
                "skipped": {"type": "integer"},
                "errors": {"type": "integer"},
                "success": {"type": "boolean"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "path", "op", "status", "compare"],
                "properties": {
                    "id": {"type": "string"},
                    "path": {"type": "array", "items": {"type": "string"}},
                    "op": {"type": "string"},
                    "status": {"enum": ["PASS", "FAIL", "SKIP", "ERROR"]},
                    "compare": {"enum": ["strict", "deep", "approx"]},
                    "xfail": {"type": "boolean"},
                    "message": {"type": "string"},
                    "error_kind": {"type": "string"},
                    "actual": {},
                },
            },
        },
    },
}
