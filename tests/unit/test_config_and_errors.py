# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx

from wsmanprobe import config
from wsmanprobe.config import DEFAULT_USER_AGENT
from wsmanprobe.errors import ErrorCategory, categorize_exception, error_category_to_reason


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("WSMANPROBE_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("WSMANPROBE_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("WSMANPROBE_HTTP_REDIRECTS", "true")
    monkeypatch.setenv("WSMANPROBE_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("WSMANPROBE_CA_TRUST_FILE", "/etc/ssl/winrm-ca.pem")
    monkeypatch.setenv("WSMANPROBE_HTTP_MAX_BODY_BYTES", "4096")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is True
    assert settings.verify_ssl is False
    assert settings.ca_trust_file == "/etc/ssl/winrm-ca.pem"
    assert settings.max_body_bytes == 4096


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("WSMANPROBE_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("WSMANPROBE_HTTP_MAX_BODY_BYTES", "-5")
    monkeypatch.setenv("WSMANPROBE_CA_TRUST_FILE", "  ")
    monkeypatch.setenv("WSMANPROBE_HTTP_VERIFY_SSL", "ture")
    monkeypatch.setenv("WSMANPROBE_HTTP_REDIRECTS", "maybe")

    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.max_body_bytes == config.HttpSettings.max_body_bytes
    assert settings.ca_trust_file is None
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.verify_ssl is True
    assert settings.allow_redirects is False


def test_http_settings_defaults(monkeypatch):
    for name in ("WSMANPROBE_HTTP_REDIRECTS", "WSMANPROBE_HTTP_VERIFY_SSL", "WSMANPROBE_HTTP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_http_settings()
    assert settings.allow_redirects is False
    assert settings.verify_ssl is True


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("WSMANPROBE_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("WSMANPROBE_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_categorize_exception():
    assert categorize_exception(httpx.ConnectTimeout("t")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ssl.SSLError("bad cert")) == ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror("nope")) == ErrorCategory.DNS_ERROR
    assert categorize_exception(ConnectionRefusedError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(TimeoutError()) == ErrorCategory.TIMEOUT
    assert categorize_exception(Exception("who knows")) == ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_follows_cause():
    try:
        try:
            raise ssl.SSLCertVerificationError("certificate verify failed")
        except ssl.SSLError as inner:
            raise httpx.ConnectError("certificate verify failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) == ErrorCategory.SSL_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.DNS_ERROR) == "DNS resolution failure"
    assert error_category_to_reason(None) == ""


def test_level_for_verbosity():
    from wsmanprobe.log import level_for_verbosity

    assert level_for_verbosity(0) is None
    assert level_for_verbosity(1) is None
    assert level_for_verbosity(2) == "DEBUG"


def test_http_settings_bool_env_accepts_explicit_false(monkeypatch):
    monkeypatch.setenv("WSMANPROBE_HTTP_VERIFY_SSL", "off")
    monkeypatch.setenv("WSMANPROBE_HTTP_REDIRECTS", " YES ")
    settings = config.load_http_settings()
    assert settings.verify_ssl is False
    assert settings.allow_redirects is True
