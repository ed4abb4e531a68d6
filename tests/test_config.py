"""Tests for configuration."""

import pytest

from scriptgen.config import Config


def test_models_come_from_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_MODEL", "gemini-1.5-flash")
    monkeypatch.setenv("SCRIPTGEN_TIMEOUT", "30")

    cfg = Config()

    assert cfg.gemini_model == "gemini-1.5-flash"
    assert cfg.request_timeout == 30.0


def test_credentials_path_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("SCRIPTGEN_CREDENTIALS", "~/keys.yaml")

    assert Config().credentials_file == tmp_path / "keys.yaml"


def test_validate_timeouts(monkeypatch):
    monkeypatch.setenv("SCRIPTGEN_TIMEOUT", "0")

    with pytest.raises(ValueError, match="SCRIPTGEN_TIMEOUT"):
        Config().validate_timeouts()

    Config(request_timeout=5).validate_timeouts()


def test_config_has_no_unused_paths():
    assert set(name for name in Config.model_fields if name.endswith("_file")) == {"credentials_file"}
    assert "workspace" not in Config.model_fields
