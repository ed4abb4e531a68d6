"""Tests for the credential store."""

import pytest
import yaml

from scriptgen.config import config
from scriptgen.credentials import CredentialStore


def test_missing_key_returns_none(store):
    assert store.get("gemini_api_key") is None
    assert not store.has("gemini_api_key")


def test_set_and_get(store):
    store.set("gemini_api_key", "  abc123  ")

    assert store.get("gemini_api_key") == "abc123"
    assert yaml.safe_load(store.path.read_text()) == {"gemini_api_key": "abc123"}


def test_blank_key_is_rejected(store):
    with pytest.raises(ValueError):
        store.set("gemini_api_key", "   ")
    assert not store.path.exists()


def test_environment_overrides_file(store, monkeypatch):
    store.set("mistral_api_key", "from-file")
    monkeypatch.setenv("MISTRAL_API_KEY", "from-env")

    assert store.get("mistral_api_key") == "from-env"


def test_file_is_read_fresh(store):
    store.set("openai_api_key", "old")
    store.path.write_text(yaml.safe_dump({"openai_api_key": "new"}))

    assert store.get("openai_api_key") == "new"


def test_delete(store):
    store.set("grok_api_key", "k1")
    store.set("claude_api_key", "k2")

    assert store.delete("grok_api_key") is True
    assert store.delete("grok_api_key") is False
    assert store.get("grok_api_key") is None
    assert store.get("claude_api_key") == "k2"


def test_default_path_comes_from_config():
    assert CredentialStore().path == config.credentials_file


def test_non_mapping_file_is_an_error(store):
    store.path.write_text("- just\n- a list\n")

    with pytest.raises(ValueError):
        store.get("gemini_api_key")
