from __future__ import annotations

"""Name validation.

CONTRACT
- Inputs: field set names, field keys
- Outputs (required):
  - validate_set_name() returns the validated name or raises
  - validate_field_key() returns the validated key or raises
- Invariants:
  - Set names match `[A-Za-z0-9][A-Za-z0-9_-]{0,31}`
  - Field keys are non-empty and contain no double quote or backslash
- Failure:
  - Raises ValueError on invalid names
"""

import re

_SET_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]{0,31}$")


def validate_set_name(name: str) -> str:
    if not _SET_NAME_RE.fullmatch(name):
        raise ValueError(
            "Invalid field set name. Use 1-32 chars: letters/digits, plus '_-'. Must start with a "
            "letter or digit."
        )
    return name


def validate_field_key(key: str) -> str:
    # A quote or backslash can never appear inside a JSON key token we match on.
    if not key or '"' in key or "\\" in key:
        raise ValueError(f"Invalid field key {key!r}. Must be non-empty, without quotes or backslashes.")
    return key
