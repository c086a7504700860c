"""Error types.

CONTRACT
- Inputs: none
- Outputs:
  - InvalidInputError raised by every obfuscate() entry point
- Invariants:
  - InvalidInputError is a ValueError so callers may catch either
  - `kind` is "null" for a missing argument, "type" for a non-str argument
- Failure:
  - n/a
"""

from __future__ import annotations

from typing import Any, Literal

InputErrorKind = Literal["null", "type"]


class InvalidInputError(ValueError):
    def __init__(self, kind: InputErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def require_text(value: Any) -> str:
    """Return `value` unchanged if it is a str, else raise InvalidInputError."""
    if value is None:
        raise InvalidInputError("null", "Cannot obfuscate None; expected a str.")
    if not isinstance(value, str):
        raise InvalidInputError(
            "type", f"Cannot obfuscate {type(value).__name__}; expected a str."
        )
    return value
