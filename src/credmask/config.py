from __future__ import annotations

"""Configuration models.

CONTRACT
- Inputs: YAML file path (credmask.yaml) or dictionary data
- Outputs (required):
  - Validated RedactionConfig / FieldSet objects
  - RedactionConfig.build_redactor() returning a Redactor over every field
- Invariants:
  - Field set names match `[A-Za-z0-9][A-Za-z0-9_-]{0,31}`
  - Base redactor fields always come first, configured fields follow in file
    order, duplicates dropped
  - Default config adds nothing (email/password only)
- Failure:
  - Raises ValueError on invalid schema, names or keys
  - Raises FileNotFoundError if the file is missing
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from .obfuscators import Redactor, email_password_obfuscator
from .util.ids import validate_field_key, validate_set_name
from .util.text import read_text_file

CUSTOM_SET_NAME = "custom"


@dataclass(frozen=True)
class FieldSet:
    name: str
    fields: tuple[str, ...]


@dataclass(frozen=True)
class RedactionConfig:
    field_sets: tuple[FieldSet, ...] = field(default_factory=tuple)

    def all_fields(self) -> tuple[str, ...]:
        keys: list[str] = []
        for fs in self.field_sets:
            keys.extend(fs.fields)
        return tuple(dict.fromkeys(keys))

    def build_redactor(self, base: Redactor | None = None) -> Redactor:
        base = base if base is not None else email_password_obfuscator()
        return base.union(*self.all_fields())


CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "fields": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "field_sets": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "pattern": "^[A-Za-z0-9][A-Za-z0-9_-]{0,31}$"},
                    "fields": {"type": "array", "items": {"type": "string", "minLength": 1}},
                },
                "required": ["name", "fields"],
            },
        },
    },
    "additionalProperties": False,
}


def parse_config(data: dict[str, Any]) -> RedactionConfig:
    import jsonschema  # lazy import

    try:
        jsonschema.validate(instance=data, schema=CONFIG_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ValueError(f"Invalid credmask config: {e.message}") from e

    sets: list[FieldSet] = []
    loose = [validate_field_key(str(k)) for k in data.get("fields", []) or []]
    if loose:
        sets.append(FieldSet(name=CUSTOM_SET_NAME, fields=tuple(loose)))
    for s in data.get("field_sets", []) or []:
        sets.append(
            FieldSet(
                name=validate_set_name(str(s["name"])),
                fields=tuple(validate_field_key(str(k)) for k in s["fields"]),
            )
        )
    return RedactionConfig(field_sets=tuple(sets))


def load_config(path: Path) -> RedactionConfig:
    data = yaml.safe_load(read_text_file(path)) or {}
    cfg = parse_config(data)
    logger.debug(f"Loaded {len(cfg.field_sets)} field sets from {path}")
    return cfg
