# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl

import httpx

from statuscheck import config
from statuscheck.config import DEFAULT_TARGET, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ProbeSettings
from statuscheck.errors import ErrorCategory, ProbeError, categorize_exception


def test_probe_settings_defaults():
    settings = ProbeSettings()
    assert settings.target == "https://charm.sh"
    assert settings.timeout == 10.0
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.allow_redirects is True
    assert settings.verify_ssl is True


def test_probe_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("STATUSCHECK_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("STATUSCHECK_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("STATUSCHECK_HTTP_VERIFY_SSL", "0")

    settings = config.load_probe_settings()

    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False


def test_target_and_timeout_ignore_environment(monkeypatch):
    monkeypatch.setenv("STATUSCHECK_TARGET", "http://elsewhere")
    monkeypatch.setenv("STATUSCHECK_HTTP_TIMEOUT", "1")
    settings = config.load_probe_settings()
    assert settings.target == DEFAULT_TARGET
    assert settings.timeout == DEFAULT_TIMEOUT


def test_bool_env_truthy_variants(monkeypatch):
    for value in ("1", "true", "YES", " on "):
        monkeypatch.setenv("STATUSCHECK_HTTP_REDIRECTS", value)
        assert config.load_probe_settings().allow_redirects is True
    monkeypatch.setenv("STATUSCHECK_HTTP_REDIRECTS", "nope")
    assert config.load_probe_settings().allow_redirects is False


def test_categorize_exception_timeouts_and_connection_errors():
    assert categorize_exception(httpx.ConnectTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ReadTimeout("slow")) == ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused")) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ConnectionRefusedError()) == ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("odd")) == ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_follows_cause_chain():
    try:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except socket.gaierror as exc:
            raise httpx.ConnectError("[Errno -2] Name or service not known") from exc
    except httpx.ConnectError as wrapped:
        assert categorize_exception(wrapped) == ErrorCategory.DNS_ERROR

    try:
        try:
            raise ssl.SSLError("certificate verify failed")
        except ssl.SSLError as exc:
            raise httpx.ConnectError("certificate verify failed") from exc
    except httpx.ConnectError as wrapped:
        assert categorize_exception(wrapped) == ErrorCategory.SSL_ERROR


def test_probe_error_str_is_message():
    error = ProbeError(message="connection refused", error_type="ConnectError")
    assert str(error) == "connection refused"
    assert error.category == ErrorCategory.UNKNOWN_ERROR


def test_setup_logging_defaults_to_stderr(monkeypatch):
    from statuscheck import log

    calls = []
    monkeypatch.delenv("STATUSCHECK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STATUSCHECK_LOG_FILE", raising=False)
    monkeypatch.setattr(log.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    log.setup_logging()

    assert calls == [{"level": logging.WARNING, "format": log.LOG_FORMAT}]


def test_setup_logging_file_and_level_from_env_and_args(monkeypatch, tmp_path):
    from statuscheck import log

    calls = []
    monkeypatch.setenv("STATUSCHECK_LOG_LEVEL", "debug")
    monkeypatch.setenv("STATUSCHECK_LOG_FILE", str(tmp_path / "env.log"))
    monkeypatch.setattr(log.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    log.setup_logging()
    log.setup_logging("info", str(tmp_path / "arg.log"))
    log.setup_logging("nonsense")

    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["filename"] == str(tmp_path / "env.log")
    assert calls[1]["level"] == logging.INFO
    assert calls[1]["filename"] == str(tmp_path / "arg.log")
    assert calls[2]["level"] == logging.WARNING
