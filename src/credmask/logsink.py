"""Loguru integration.

CONTRACT
- Inputs: a Redactor (default: email/password)
- Outputs:
  - redacting_patcher() returns a loguru patcher that rewrites
    record["message"] through the Redactor
  - install() configures the global loguru logger with that patcher
- Invariants:
  - Sinks only ever receive the redacted message
  - Records are mutated in place, as loguru patchers expect
- Failure:
  - None beyond loguru's own configuration errors
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from loguru import logger

from .obfuscators import Redactor, email_password_obfuscator


def redacting_patcher(redactor: Redactor) -> Callable[[dict[str, Any]], None]:
    def _patch(record: dict[str, Any]) -> None:
        record["message"] = redactor.obfuscate(record["message"])

    return _patch


def install(redactor: Redactor | None = None) -> Redactor:
    """Make every message logged through `loguru.logger` go through `redactor`."""
    redactor = redactor if redactor is not None else email_password_obfuscator()
    logger.configure(patcher=redacting_patcher(redactor))
    return redactor
