"""External provider integrations."""

from .base import ProviderAdapter, TextAdapter, ImageAdapter
from .text import GeminiAdapter, OpenAIAdapter, GrokAdapter, MistralAdapter
from .anthropic import ClaudeAdapter
from .leonardo import LeonardoAdapter
from .kling import KlingAdapter
from .dispatcher import ScriptDispatcher, ImageDispatcher, TEXT_ADAPTERS, IMAGE_ADAPTERS

__all__ = [
    "ProviderAdapter",
    "TextAdapter",
    "ImageAdapter",
    "GeminiAdapter",
    "OpenAIAdapter",
    "GrokAdapter",
    "MistralAdapter",
    "ClaudeAdapter",
    "LeonardoAdapter",
    "KlingAdapter",
    "ScriptDispatcher",
    "ImageDispatcher",
    "TEXT_ADAPTERS",
    "IMAGE_ADAPTERS",
]
