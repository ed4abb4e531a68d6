"""HTTP adapters for text-generation providers."""

import logging
from abc import abstractmethod
from typing import Any

import requests

from ..config import config
from .base import TextAdapter

logger = logging.getLogger(__name__)


class GeminiAdapter(TextAdapter):
    """Google Gemini `generateContent` endpoint; key travels as a query parameter."""

    provider_id = "gemini"

    def generate(self, prompt: str, api_key: str) -> str:
        url = f"{self.provider.endpoint}/models/{config.gemini_model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}

        self._logger.info(f"Generating script with Gemini ({config.gemini_model})")
        response = requests.post(
            url,
            params={"key": api_key},
            headers={"Content-Type": "application/json"},
            json=body,
            timeout=self._timeout,
        )
        data = self._check_response(response)
        return self._unwrap(data, "candidates", 0, "content", "parts", 0, "text")


class ChatCompletionsAdapter(TextAdapter):
    """OpenAI-compatible `/chat/completions` endpoint with bearer auth."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Return the model being used."""
        ...

    def build_body(self, prompt: str) -> dict[str, Any]:
        """Return the request body for one user message."""
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": config.max_tokens,
            "temperature": config.temperature,
        }

    def generate(self, prompt: str, api_key: str) -> str:
        url = f"{self.provider.endpoint}/chat/completions"
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        self._logger.info(f"Generating script with {self.provider.name} ({self.model})")
        response = requests.post(
            url,
            headers=headers,
            json=self.build_body(prompt),
            timeout=self._timeout,
        )
        data = self._check_response(response)
        return self._unwrap(data, "choices", 0, "message", "content")


class OpenAIAdapter(ChatCompletionsAdapter):
    provider_id = "openai"

    @property
    def model(self) -> str:
        return config.openai_model


class GrokAdapter(ChatCompletionsAdapter):
    provider_id = "grok"

    @property
    def model(self) -> str:
        return config.grok_model

    def build_body(self, prompt: str) -> dict[str, Any]:
        return {
            "messages": [{"role": "user", "content": prompt}],
            "model": self.model,
            "stream": False,
            "temperature": config.temperature,
        }


class MistralAdapter(ChatCompletionsAdapter):
    provider_id = "mistral"

    @property
    def model(self) -> str:
        return config.mistral_model
