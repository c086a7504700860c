import pytest
from loguru import logger

from credmask.logsink import install, redacting_patcher
from credmask.obfuscators import Redactor, obfuscator


@pytest.fixture
def captured():
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def reset_patcher():
    yield
    logger.configure(patcher=lambda record: None)


def test_patched_logger_redacts(captured):
    log = logger.patch(redacting_patcher(obfuscator()))
    log.info('login {"username":"me","password":"pw","app":"demo"}')
    assert captured == ['login {"username":"***","password":"***","app":"demo"}']


def test_unpatched_logger_untouched(captured):
    logger.info('{"password":"pw"}')
    assert captured == ['{"password":"pw"}']


def test_install_configures_global_logger(captured, reset_patcher):
    used = install(Redactor.for_fields("token"))
    assert used.fields == ("token",)
    logger.warning('refresh {"token":"t0k3n"}')
    assert captured == ['refresh {"token":"***"}']


def test_install_defaults_to_email_password(captured, reset_patcher):
    used = install()
    assert used.fields == ("username", "password")
    logger.info('{"username":"u"}')
    assert captured == ['{"username":"***"}']
