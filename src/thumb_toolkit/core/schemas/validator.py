"""
Schema Validation Utilities

Validates configuration documents against the bundled JSON schemas.

The schema checks structure only (known top-level keys, value types,
background channel ranges). Rule arity and parameter values are checked
by the rule parser in ``thumb_toolkit.config`` so the error can name the
thumbnail it belongs to.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""
    
    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_config(data: Any) -> None:
    """
    Validate a configuration document against the config schema.
    
    Args:
        data: Parsed configuration (normally a dict from JSON)
        
    Raises:
        ValidationError: If data is invalid. ``path`` points at the first
            offending location, ``errors`` lists every violation found.
    """
    schema = _load_schema("config")
    validator = jsonschema.Draft202012Validator(schema)
    violations = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not violations:
        return
    
    errors = [
        f"{_format_path(v.absolute_path) or '<root>'}: {v.message}"
        for v in violations
    ]
    first = violations[0]
    raise ValidationError(
        f"Invalid configuration: {errors[0]}",
        path=_format_path(first.absolute_path),
        errors=errors,
    )


def _format_path(path) -> str:
    """Render a jsonschema path deque as 'thumbs.small.width'."""
    return ".".join(str(part) for part in path)
