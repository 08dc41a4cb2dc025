from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..core.errors import ScriptError
from ..core.exit_codes import ERR_VALIDATION

SCHEMAS_ROOT = Path(__file__).resolve().parents[1] / "schemas"

CATALOG = {
    "bindgenctl.config.v1": "bindgen-config.schema.json",
    "bindgenctl.report.v1": "bindgen-report.schema.json",
    "bindgenctl.doctor.v1": "bindgen-doctor.schema.json",
}


def schema_path_for(schema_name: str) -> Path:
    try:
        return SCHEMAS_ROOT / CATALOG[schema_name]
    except KeyError as exc:
        raise ScriptError(f"unknown schema: {schema_name}", ERR_VALIDATION, kind="unknown_schema") from exc


def load_schema(schema_name: str) -> dict[str, Any]:
    return json.loads(schema_path_for(schema_name).read_text(encoding="utf-8"))


def validate(schema_name: str, payload: Any, code: int = ERR_VALIDATION) -> None:
    schema = load_schema(schema_name)
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ScriptError(f"schema validation failed for {schema_name} at {loc}: {exc.message}", code) from exc
