"""Provider dispatch: pick an adapter from the catalog and invoke it."""

import logging
from typing import Mapping, Optional, Type

from ..credentials import CredentialStore
from ..errors import MissingCredentialError, UnsupportedProviderError
from ..models import AIProvider, ProviderKind, ScriptData
from ..prompt import build_prompt
from ..providers import get_provider
from .anthropic import ClaudeAdapter
from .base import ImageAdapter, ProviderAdapter, TextAdapter
from .kling import KlingAdapter
from .leonardo import LeonardoAdapter
from .text import GeminiAdapter, GrokAdapter, MistralAdapter, OpenAIAdapter

logger = logging.getLogger(__name__)

TEXT_ADAPTERS: dict[str, Type[TextAdapter]] = {
    cls.provider_id: cls
    for cls in (GeminiAdapter, OpenAIAdapter, ClaudeAdapter, GrokAdapter, MistralAdapter)
}

IMAGE_ADAPTERS: dict[str, Type[ImageAdapter]] = {
    cls.provider_id: cls for cls in (LeonardoAdapter, KlingAdapter)
}


class _Dispatcher:
    kind: ProviderKind

    def __init__(
        self,
        adapters: Mapping[str, Type[ProviderAdapter]],
        credentials: Optional[CredentialStore] = None,
    ) -> None:
        self._adapters = dict(adapters)
        self._credentials = credentials or CredentialStore()

    @property
    def credentials(self) -> CredentialStore:
        """Return the credential store used for key lookups."""
        return self._credentials

    def adapter_for(self, provider_id: str) -> ProviderAdapter:
        """Build the adapter registered for a provider.

        Raises:
            UnsupportedProviderError: If the provider is unknown or has no adapter.
        """
        provider = get_provider(provider_id, self.kind)
        adapter_cls = self._adapters.get(provider.id)
        if adapter_cls is None:
            raise UnsupportedProviderError(provider_id)
        return adapter_cls(provider)

    def resolve_credential(self, provider: AIProvider, api_key: Optional[str]) -> str:
        """Return the given key, or the stored one.

        Raises:
            MissingCredentialError: If neither is available.
        """
        key = api_key or self._credentials.get(provider.key_name)
        if not key:
            raise MissingCredentialError(provider.id, provider.key_name)
        return key


class ScriptDispatcher(_Dispatcher):
    """Generates scripts through the selected text provider."""

    kind = ProviderKind.TEXT

    def __init__(
        self,
        credentials: Optional[CredentialStore] = None,
        adapters: Optional[Mapping[str, Type[TextAdapter]]] = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            credentials: Key store. Defaults to a store at config.credentials_file.
            adapters: Adapter classes by provider id. Defaults to TEXT_ADAPTERS.
        """
        super().__init__(adapters or TEXT_ADAPTERS, credentials)

    def generate(
        self,
        provider_id: str,
        script_data: ScriptData,
        api_key: Optional[str] = None,
    ) -> str:
        """Generate a script.

        Args:
            provider_id: Text provider id from the catalog.
            script_data: Form fields for the prompt.
            api_key: Credential. Read from the store when omitted.

        Returns:
            The generated script text.

        Raises:
            UnsupportedProviderError: Unknown provider; nothing is sent.
            MissingCredentialError: No key available; nothing is sent.
            ProviderHTTPError: The provider answered with a non-success status.
            UnexpectedResponseError: The answer lacks the generated text.
        """
        adapter = self.adapter_for(provider_id)
        key = self.resolve_credential(adapter.provider, api_key)
        prompt = build_prompt(script_data)

        logger.debug(f"Dispatching prompt of length {len(prompt)} to {provider_id}")
        text = adapter.generate(prompt, key)
        logger.info(f"Received script of length {len(text)} from {adapter.provider.name}")
        return text


class ImageDispatcher(_Dispatcher):
    """Generates images through the selected image provider."""

    kind = ProviderKind.IMAGE

    def __init__(
        self,
        credentials: Optional[CredentialStore] = None,
        adapters: Optional[Mapping[str, Type[ImageAdapter]]] = None,
    ) -> None:
        super().__init__(adapters or IMAGE_ADAPTERS, credentials)

    def generate_image(
        self,
        provider_id: str,
        prompt: str,
        api_key: Optional[str] = None,
    ) -> str:
        """Generate one image and return its URL.

        Raises:
            ProviderNotAvailableError: The provider is a stub; nothing is sent.
            MissingCredentialError: No key available; nothing is sent.
        """
        adapter = self.adapter_for(provider_id)
        adapter.check_available()
        key = None
        if adapter.requires_credential:
            key = self.resolve_credential(adapter.provider, api_key)
        return adapter.generate_image(prompt, key)
