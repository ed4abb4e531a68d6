"""Anthropic Claude adapter."""

import logging
from typing import Callable, Optional

from anthropic import Anthropic, APIStatusError, APIConnectionError

from ..config import config
from ..errors import ProviderError, ProviderHTTPError, UnexpectedResponseError
from ..models import AIProvider
from .base import TextAdapter

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Anthropic]


class ClaudeAdapter(TextAdapter):
    """Adapter for the Claude Messages API via the Anthropic SDK.

    The SDK sends the key in the `x-api-key` header. Retries are disabled so
    each call makes exactly one request.
    """

    provider_id = "claude"

    def __init__(
        self,
        provider: AIProvider,
        timeout: Optional[float] = None,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            provider: Catalog entry of the provider.
            timeout: Request timeout in seconds.
            client_factory: Callable building the SDK client. Defaults to `Anthropic`.
        """
        super().__init__(provider, timeout)
        self._client_factory = client_factory or Anthropic

    @property
    def model(self) -> str:
        """Return the model being used."""
        return config.claude_model

    def generate(self, prompt: str, api_key: str) -> str:
        client = self._client_factory(
            api_key=api_key,
            base_url=self.provider.endpoint,
            max_retries=0,
            timeout=self._timeout,
        )

        self._logger.info(f"Generating script with Claude ({self.model})")
        try:
            response = client.messages.create(
                model=self.model,
                max_tokens=config.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIStatusError as e:
            self._logger.error(f"Claude API error: {e.status_code}: {e.message}")
            raise ProviderHTTPError(self.provider.name, e.status_code) from e
        except APIConnectionError as e:
            self._logger.error(f"Connection error: {e}")
            raise ProviderError(
                self.provider.name, f"Could not reach {self.provider.name}"
            ) from e

        try:
            return response.content[0].text
        except (AttributeError, IndexError, TypeError):
            raise UnexpectedResponseError(self.provider.name, "missing content[0].text") from None
