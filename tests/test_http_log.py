import pytest

from credmask.errors import InvalidInputError
from credmask.http_log import HttpLogObfuscator, login_http_log_obfuscator
from credmask.obfuscators import obfuscator

USERPASS_LINE = (
    'POST https://realm.example.com/api/client/v2.0/app/my-app/auth/providers/local-userpass/login '
    '{"username":"me@example.com","password":"hunter2"}'
)
API_KEY_LINE = (
    "POST https://realm.example.com/api/client/v2.0/app/my-app/auth/providers/api-key/login "
    '{"key":"0123456789abcdef","password":"not-for-this-provider"}'
)


def test_email_password_provider():
    out = login_http_log_obfuscator().obfuscate(USERPASS_LINE)
    assert out.endswith('{"username":"***","password":"***"}')
    assert "/providers/local-userpass/login" in out


def test_api_key_provider_masks_only_its_fields():
    out = login_http_log_obfuscator().obfuscate(API_KEY_LINE)
    assert '"key":"***"' in out
    assert '"password":"not-for-this-provider"' in out


def test_token_provider():
    line = 'POST /auth/providers/oauth2-google/login {"authCode":"4/abc","provider":"oauth2-google"}'
    out = login_http_log_obfuscator().obfuscate(line)
    assert out == 'POST /auth/providers/oauth2-google/login {"authCode":"***","provider":"oauth2-google"}'


def test_unrelated_endpoint_untouched():
    line = 'POST /functions/call {"username":"me","password":"pw"}'
    assert login_http_log_obfuscator().obfuscate(line) == line


def test_unknown_provider_untouched():
    line = 'POST /auth/providers/anon-user/login {"password":"pw"}'
    assert login_http_log_obfuscator().obfuscate(line) == line


def test_none_rejected():
    with pytest.raises(InvalidInputError):
        login_http_log_obfuscator().obfuscate(None)


def test_custom_feature():
    o = HttpLogObfuscator(feature="login", obfuscators={"basic": obfuscator()})
    assert o.obfuscate('/login/basic {"password":"x"}') == '/login/basic {"password":"***"}'
    assert o.provider_for('/providers/basic {"password":"x"}') is None


def test_extended_adds_fields_to_every_provider():
    o = login_http_log_obfuscator().extended("device_id")
    line = 'POST /auth/providers/local-userpass/login {"password":"pw","device_id":"d1"}'
    assert o.obfuscate(line) == 'POST /auth/providers/local-userpass/login {"password":"***","device_id":"***"}'
    assert "device_id" in o.obfuscators["api-key"].fields


def test_obfuscate_counted():
    _, counts = login_http_log_obfuscator().obfuscate_counted(USERPASS_LINE)
    assert counts == {"username": 1, "password": 1}
    _, counts = login_http_log_obfuscator().obfuscate_counted("GET /location")
    assert counts == {}


def test_obfuscator_is_hashable_and_read_only():
    source = {"local-userpass": obfuscator()}
    o = HttpLogObfuscator(obfuscators=source)
    assert {o: "ok"}[o] == "ok"
    with pytest.raises(TypeError):
        o.obfuscators["api-key"] = obfuscator()
    # Later changes to the caller's dict do not leak in.
    source["api-key"] = obfuscator()
    assert o.provider_for('/providers/api-key/login {"password":"x"}') is None
