"""Catalog of known generation providers."""

from typing import Optional

from .errors import UnsupportedProviderError
from .models import AIProvider, ProviderKind

TEXT_PROVIDERS: tuple[AIProvider, ...] = (
    AIProvider(
        id="gemini",
        name="Google Gemini",
        icon="✨",
        endpoint="https://generativelanguage.googleapis.com/v1beta",
        key_name="gemini_api_key",
        api_key_url="https://makersuite.google.com/app/apikey",
    ),
    AIProvider(
        id="openai",
        name="OpenAI",
        icon="🤖",
        endpoint="https://api.openai.com/v1",
        key_name="openai_api_key",
        api_key_url="https://platform.openai.com/api-keys",
    ),
    AIProvider(
        id="claude",
        name="Claude",
        icon="🧠",
        endpoint="https://api.anthropic.com",
        key_name="claude_api_key",
        api_key_url="https://console.anthropic.com/settings/keys",
    ),
    AIProvider(
        id="grok",
        name="Grok",
        icon="⚡",
        endpoint="https://api.x.ai/v1",
        key_name="grok_api_key",
        api_key_url="https://console.x.ai/",
    ),
    AIProvider(
        id="mistral",
        name="Mistral",
        icon="🌪️",
        endpoint="https://api.mistral.ai/v1",
        key_name="mistral_api_key",
        api_key_url="https://console.mistral.ai/api-keys/",
    ),
)

IMAGE_PROVIDERS: tuple[AIProvider, ...] = (
    AIProvider(
        id="leonardo",
        name="Leonardo AI",
        icon="🎨",
        endpoint="https://cloud.leonardo.ai/api/rest/v1",
        key_name="leonardo_api_key",
        api_key_url="https://cloud.leonardo.ai/api-access",
        kind=ProviderKind.IMAGE,
    ),
    AIProvider(
        id="kling",
        name="Kling AI",
        icon="🖼️",
        endpoint="",
        key_name="kling_api_key",
        api_key_url="https://klingai.com/",
        kind=ProviderKind.IMAGE,
    ),
)

PROVIDERS: tuple[AIProvider, ...] = TEXT_PROVIDERS + IMAGE_PROVIDERS

_BY_ID = {provider.id: provider for provider in PROVIDERS}


def get_provider(provider_id: str, kind: Optional[ProviderKind] = None) -> AIProvider:
    """Look up a provider by id.

    Args:
        provider_id: Provider identifier.
        kind: Restrict the lookup to one provider family.

    Returns:
        The provider descriptor.

    Raises:
        UnsupportedProviderError: If the id is unknown or of another family.
    """
    provider = _BY_ID.get(provider_id)
    if provider is None or (kind is not None and provider.kind != kind):
        raise UnsupportedProviderError(provider_id)
    return provider


def provider_ids(kind: Optional[ProviderKind] = None) -> list[str]:
    """Return catalog ids in display order."""
    return [p.id for p in PROVIDERS if kind is None or p.kind == kind]
