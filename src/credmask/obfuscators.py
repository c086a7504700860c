"""Field redaction.

CONTRACT
- Inputs: a single text line (usually a JSON-shaped log message)
- Outputs:
  - The same line with the value of every configured `"key":"value"` pair
    replaced by MASK
- Invariants:
  - Only values are touched; keys, quotes, braces and unrelated pairs are
    preserved byte for byte
  - Key names match exactly and case-sensitively (`"password_hint"` is not
    `"password"`)
  - Idempotent: obfuscate(obfuscate(x)) == obfuscate(x)
  - Redactor instances are immutable and hold no per-call state
- Failure:
  - Raises InvalidInputError on None or non-str input
  - Text that is not JSON is never an error; it simply does not match
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .errors import require_text

MASK = "***"

EMAIL_PASSWORD_FIELDS = ("username", "password")
API_KEY_FIELDS = ("key",)
TOKEN_FIELDS = ("id_token", "access_token", "accessToken", "authCode", "token")

# Value runs to the next unescaped quote.
_VALUE = r'((?:[^"\\]|\\.)*)'


@dataclass(frozen=True)
class FieldPattern:
    key: str
    token: str

    @classmethod
    def for_key(cls, key: str) -> FieldPattern:
        if not key:
            raise ValueError("Field key must be a non-empty string.")
        return cls(key=key, token=re.escape(key))


def _compile(patterns: tuple[FieldPattern, ...]) -> re.Pattern | None:
    if not patterns:
        return None
    keys = "|".join(p.token for p in patterns)
    return re.compile(r'("(' + keys + r')"\s*:\s*")' + _VALUE + r'(")')


@dataclass(frozen=True)
class Redactor:
    patterns: tuple[FieldPattern, ...] = ()
    # One matcher over every key, applied in a single left-to-right pass.
    matcher: re.Pattern | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "matcher", _compile(self.patterns))

    @classmethod
    def for_fields(cls, *keys: str) -> Redactor:
        """Build a redactor for `keys`; duplicates collapse, first-seen order wins."""
        ordered = list(dict.fromkeys(keys))
        return cls(patterns=tuple(FieldPattern.for_key(k) for k in ordered))

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(p.key for p in self.patterns)

    def union(self, *keys: str) -> Redactor:
        return Redactor.for_fields(*self.fields, *keys)

    def obfuscate(self, text: str) -> str:
        out, _ = self.obfuscate_counted(text)
        return out

    def obfuscate_counted(self, text: str) -> tuple[str, dict[str, int]]:
        """Redact `text` and report how many values were masked per key.

        Keys that did not match are left out of the counts.
        """
        out = require_text(text)
        if self.matcher is None:
            return out, {}
        hits: dict[str, int] = {}

        def _mask(m: re.Match) -> str:
            hits[m.group(2)] = hits.get(m.group(2), 0) + 1
            return m.group(1) + MASK + m.group(4)

        out = self.matcher.sub(_mask, out)
        return out, {k: hits[k] for k in self.fields if k in hits}


def email_password_obfuscator() -> Redactor:
    return Redactor.for_fields(*EMAIL_PASSWORD_FIELDS)


# Short name used by callers that only deal with email/password logins.
obfuscator = email_password_obfuscator


def api_key_obfuscator() -> Redactor:
    return Redactor.for_fields(*API_KEY_FIELDS)


def token_obfuscator() -> Redactor:
    return Redactor.for_fields(*TOKEN_FIELDS)
