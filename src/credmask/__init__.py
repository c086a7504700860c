"""credmask package.

Simple API for log pipelines:

    import credmask

    credmask.obfuscator().obfuscate('{"username":"me","password":"pw"}')
    # -> '{"username":"***","password":"***"}'

    # Or make loguru redact every message:
    credmask.install()
"""

__version__ = "0.1.0"

from .config import RedactionConfig, load_config
from .errors import InvalidInputError
from .http_log import HttpLogObfuscator, login_http_log_obfuscator
from .logsink import install, redacting_patcher
from .obfuscators import (
    MASK,
    FieldPattern,
    Redactor,
    api_key_obfuscator,
    email_password_obfuscator,
    obfuscator,
    token_obfuscator,
)

__all__ = [
    "MASK",
    "FieldPattern",
    "HttpLogObfuscator",
    "InvalidInputError",
    "RedactionConfig",
    "Redactor",
    "api_key_obfuscator",
    "email_password_obfuscator",
    "install",
    "load_config",
    "login_http_log_obfuscator",
    "obfuscator",
    "redacting_patcher",
    "token_obfuscator",
]
