"""Leonardo AI image generation adapter."""

import logging
import time
from typing import Callable, Optional

import requests

from ..config import config
from ..errors import ProviderError, ProviderTimeoutError
from ..models import AIProvider
from .base import ImageAdapter

logger = logging.getLogger(__name__)


class GenerationStatus:
    """Job states reported by Leonardo."""

    PENDING = "PENDING"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"


class LeonardoAdapter(ImageAdapter):
    """Adapter for Leonardo AI text-to-image generation.

    This adapter handles:
    - Submitting a generation job for one prompt
    - Polling the job until it completes or fails
    - Returning the URL of the first generated image
    """

    provider_id = "leonardo"

    def __init__(
        self,
        provider: AIProvider,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
        max_poll_time: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the adapter.

        Args:
            provider: Catalog entry of the provider.
            timeout: Per-request timeout in seconds.
            poll_interval: Seconds between status checks.
            max_poll_time: Maximum seconds to wait for the job.
            sleep: Sleep function used between status checks.
            clock: Monotonic clock used to measure the wait.
        """
        super().__init__(provider, timeout)
        self._poll_interval = poll_interval or config.leonardo_poll_interval
        self._max_poll_time = max_poll_time or config.leonardo_max_poll_time
        self._sleep = sleep
        self._clock = clock

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def generate_image(self, prompt: str, api_key: Optional[str]) -> str:
        """Generate one image for `prompt` and return its URL.

        Raises:
            ProviderHTTPError: On a non-success HTTP status.
            ProviderError: If the job fails.
            ProviderTimeoutError: If the job does not finish within max_poll_time.
        """
        generation_id = self._submit(prompt, api_key)
        return self._wait_for_image(generation_id, api_key)

    def _submit(self, prompt: str, api_key: str) -> str:
        body = {
            "prompt": prompt,
            "modelId": config.leonardo_model_id,
            "width": config.image_width,
            "height": config.image_height,
            "num_images": 1,
        }

        self._logger.info(f"Generating image with Leonardo: {prompt[:50]}...")
        response = requests.post(
            f"{self.provider.endpoint}/generations",
            headers=self._headers(api_key),
            json=body,
            timeout=self._timeout,
        )
        data = self._check_response(response)
        generation_id = self._unwrap(data, "sdGenerationJob", "generationId")
        self._logger.debug(f"Submitted Leonardo job {generation_id}")
        return generation_id

    def _wait_for_image(self, generation_id: str, api_key: str) -> str:
        url = f"{self.provider.endpoint}/generations/{generation_id}"
        start_time = self._clock()

        while True:
            response = requests.get(
                url,
                headers=self._headers(api_key),
                timeout=self._timeout,
            )
            data = self._check_response(response)
            job = self._unwrap(data, "generations_by_pk")
            status = self._unwrap(job, "status")

            if status == GenerationStatus.COMPLETE:
                image_url = self._unwrap(job, "generated_images", 0, "url")
                self._logger.info(f"Leonardo job {generation_id} completed")
                return image_url

            if status == GenerationStatus.FAILED:
                raise ProviderError(
                    self.provider.name, f"{self.provider.name} generation failed"
                )

            elapsed = self._clock() - start_time
            if elapsed >= self._max_poll_time:
                raise ProviderTimeoutError(
                    self.provider.name,
                    f"{self.provider.name} generation timed out after {elapsed:.0f}s",
                )

            self._logger.debug(f"Job {generation_id} status: {status}")
            self._sleep(self._poll_interval)
