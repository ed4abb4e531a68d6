"""Base provider adapter abstractions."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import requests

from ..config import config
from ..errors import ProviderHTTPError, UnexpectedResponseError
from ..models import AIProvider

logger = logging.getLogger(__name__)


class ProviderAdapter(ABC):
    """Abstract base class for provider adapters.

    An adapter knows one provider's request and response shape. It is built
    from the provider's catalog entry so endpoints live in one place.
    """

    #: Catalog id this adapter serves.
    provider_id: str = ""

    def __init__(self, provider: AIProvider, timeout: Optional[float] = None) -> None:
        """Initialize the adapter.

        Args:
            provider: Catalog entry of the provider.
            timeout: Request timeout in seconds. Defaults to config.request_timeout.
        """
        self._provider = provider
        self._timeout = timeout or config.request_timeout
        self._logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    @property
    def provider(self) -> AIProvider:
        """Return the provider descriptor."""
        return self._provider

    def _check_response(self, response: requests.Response) -> Any:
        """Fail on non-success status, otherwise return the decoded JSON body."""
        if not 200 <= response.status_code < 300:
            self._logger.error(
                f"{self._provider.name} API error: {response.status_code}: "
                f"{response.text[:500]}"
            )
            raise ProviderHTTPError(self._provider.name, response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedResponseError(self._provider.name, f"invalid JSON ({e})")

    def _unwrap(self, data: Any, *path: Any) -> Any:
        """Walk `path` through a decoded body, raising a typed error if absent."""
        node = data
        for step in path:
            try:
                node = node[step]
            except (KeyError, IndexError, TypeError):
                raise UnexpectedResponseError(
                    self._provider.name,
                    "missing " + "".join(
                        f"[{s}]" if isinstance(s, int) else f".{s}" for s in path
                    ).lstrip("."),
                ) from None
        return node


class TextAdapter(ProviderAdapter):
    """Adapter for a text-generation provider."""

    @abstractmethod
    def generate(self, prompt: str, api_key: str) -> str:
        """Send the prompt and return the generated text.

        Args:
            prompt: Fully built prompt.
            api_key: Provider credential.

        Returns:
            Generated text.

        Raises:
            ProviderHTTPError: On a non-success HTTP status.
            UnexpectedResponseError: If the body lacks the generated text.
        """
        ...


class ImageAdapter(ProviderAdapter):
    """Adapter for an image-generation provider."""

    #: Whether the adapter needs an API key before it can run.
    requires_credential: bool = True

    def check_available(self) -> None:
        """Raise ProviderNotAvailableError if the integration is not wired."""

    @abstractmethod
    def generate_image(self, prompt: str, api_key: Optional[str]) -> str:
        """Generate an image and return its URL."""
        ...
