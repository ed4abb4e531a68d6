"""Tests for the provider catalog."""

import pytest

from scriptgen.errors import UnsupportedProviderError
from scriptgen.models import ProviderKind
from scriptgen.providers import PROVIDERS, get_provider, provider_ids
from scriptgen.services import IMAGE_ADAPTERS, TEXT_ADAPTERS


def test_catalog_order():
    assert provider_ids(ProviderKind.TEXT) == ["gemini", "openai", "claude", "grok", "mistral"]
    assert provider_ids(ProviderKind.IMAGE) == ["leonardo", "kling"]


def test_every_provider_has_an_adapter():
    for provider in PROVIDERS:
        adapters = TEXT_ADAPTERS if provider.kind == ProviderKind.TEXT else IMAGE_ADAPTERS
        assert provider.id in adapters


def test_ids_and_key_names_are_unique():
    assert len({p.id for p in PROVIDERS}) == len(PROVIDERS)
    assert len({p.key_name for p in PROVIDERS}) == len(PROVIDERS)


def test_lookup_by_id():
    provider = get_provider("mistral")
    assert provider.name == "Mistral"
    assert provider.key_name == "mistral_api_key"


def test_unknown_id_is_rejected():
    with pytest.raises(UnsupportedProviderError, match="unknown-id"):
        get_provider("unknown-id")


def test_kind_mismatch_is_rejected():
    with pytest.raises(UnsupportedProviderError):
        get_provider("leonardo", ProviderKind.TEXT)


def test_descriptors_are_immutable():
    provider = get_provider("gemini")
    with pytest.raises(Exception):
        provider.endpoint = "http://example.invalid"
