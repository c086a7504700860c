"""HTTP request log obfuscation.

CONTRACT
- Inputs: a log line describing an HTTP request (URL plus body)
- Outputs:
  - The line redacted by the Redactor registered for the login provider named
    in the URL (`.../<feature>/<provider>/login`)
  - The line unchanged if no registered provider is named
- Invariants:
  - At most one provider Redactor is applied per line (the first provider
    segment found in the line)
  - Stateless and immutable (provider map is read-only); safe to share
    between threads and usable as a dict key
- Failure:
  - Raises InvalidInputError on None or non-str input
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from loguru import logger

from .errors import require_text
from .obfuscators import (
    Redactor,
    api_key_obfuscator,
    email_password_obfuscator,
    token_obfuscator,
)

DEFAULT_FEATURE = "providers"


@dataclass(frozen=True, eq=False)
class HttpLogObfuscator:
    feature: str = DEFAULT_FEATURE
    obfuscators: Mapping[str, Redactor] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy; callers cannot re-map providers later.
        object.__setattr__(self, "obfuscators", MappingProxyType(dict(self.obfuscators)))

    def _segment_re(self) -> re.Pattern:
        return re.compile(r"/" + re.escape(self.feature) + r"/([A-Za-z0-9_.-]+)")

    def provider_for(self, line: str) -> str | None:
        m = self._segment_re().search(line)
        if m and m.group(1) in self.obfuscators:
            return m.group(1)
        return None

    def extended(self, *keys: str) -> HttpLogObfuscator:
        """Return a copy whose provider redactors also mask `keys`."""
        return HttpLogObfuscator(
            feature=self.feature,
            obfuscators={p: r.union(*keys) for p, r in self.obfuscators.items()},
        )

    def obfuscate(self, line: str) -> str:
        out, _ = self.obfuscate_counted(line)
        return out

    def obfuscate_counted(self, line: str) -> tuple[str, dict[str, int]]:
        text = require_text(line)
        provider = self.provider_for(text)
        if provider is None:
            return text, {}
        logger.debug(f"Obfuscating request log for provider {provider}")
        return self.obfuscators[provider].obfuscate_counted(text)


def login_http_log_obfuscator() -> HttpLogObfuscator:
    email_password = email_password_obfuscator()
    api_key = api_key_obfuscator()
    token = token_obfuscator()
    return HttpLogObfuscator(
        feature=DEFAULT_FEATURE,
        obfuscators={
            "local-userpass": email_password,
            "api-key": api_key,
            "server-api-key": api_key,
            "oauth2-apple": token,
            "oauth2-facebook": token,
            "oauth2-google": token,
            "custom-token": token,
        },
    )
