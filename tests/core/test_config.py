"""Config: tests for AppSettings and the user .env writer."""

import pytest
from pydantic import ValidationError

from arkrpc.core.config import (
    AppSettings,
    ErrorPolicy,
    get_user_config_dir,
    get_user_env_file,
    write_user_env_vars,
)


def test_defaults():
    settings = AppSettings(_env_file=None)
    assert settings.base_url is None
    assert settings.http_timeout_seconds == 20.0
    assert settings.error_policy is ErrorPolicy.MESSAGE
    assert settings.validate_responses is False
    assert settings.log_format == "text"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("ARKRPC_BASE_URL", "https://api.example.test")
    monkeypatch.setenv("ARKRPC_ERROR_POLICY", "status_line")
    monkeypatch.setenv("ARKRPC_VALIDATE_RESPONSES", "true")
    settings = AppSettings(_env_file=None)
    assert settings.base_url == "https://api.example.test"
    assert settings.error_policy is ErrorPolicy.STATUS_LINE
    assert settings.validate_responses is True


def test_rejects_non_positive_timeout():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, http_timeout_seconds=0)


def test_rejects_unknown_log_format():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_format="xml")


def test_reads_values_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ARKRPC_BASE_URL=http://localhost:8080\n", encoding="utf-8")
    settings = AppSettings(_env_file=env_file)
    assert settings.base_url == "http://localhost:8080"


def test_user_config_dir_follows_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "arkrpc"
    assert get_user_env_file() == tmp_path / "arkrpc" / ".env"


def test_write_user_env_vars_merges_existing_keys(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"ARKRPC_BASE_URL": "http://a"}, env_path)
    write_user_env_vars({"ARKRPC_HTTP_TIMEOUT_SECONDS": "5"}, env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["ARKRPC_BASE_URL=http://a", "ARKRPC_HTTP_TIMEOUT_SECONDS=5"]


def test_written_env_file_is_readable_by_settings(tmp_path):
    env_path = write_user_env_vars({"ARKRPC_BASE_URL": "http://b"}, tmp_path / ".env")
    assert AppSettings(_env_file=env_path).base_url == "http://b"
