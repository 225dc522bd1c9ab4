from __future__ import annotations

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any

import jsonschema

from ethica_core import schemas


class ContractViolation(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@lru_cache(maxsize=None)
def load_schema(name: str = "ethics_item.json") -> dict[str, Any]:
    return json.loads((files(schemas) / name).read_text(encoding="utf-8"))


def validate_record(record: dict[str, Any], schema: dict[str, Any] | None = None) -> None:
    try:
        jsonschema.validate(instance=record, schema=schema or load_schema())
    except jsonschema.ValidationError as exc:
        where = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise ContractViolation(f"{record.get('id', '?')}: {where}: {exc.message}") from exc
