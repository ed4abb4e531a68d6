"""Kling AI image adapter (not wired yet)."""

from typing import Optional

from ..errors import ProviderNotAvailableError
from .base import ImageAdapter


class KlingAdapter(ImageAdapter):
    """Placeholder for Kling AI. Signals unavailability without any request."""

    provider_id = "kling"
    requires_credential = False

    def _unavailable(self) -> ProviderNotAvailableError:
        return ProviderNotAvailableError(
            self.provider.name,
            f"{self.provider.name} integration coming soon. "
            "Provide the endpoint/documentation to enable it.",
        )

    def check_available(self) -> None:
        raise self._unavailable()

    def generate_image(self, prompt: str, api_key: Optional[str]) -> str:
        raise self._unavailable()
