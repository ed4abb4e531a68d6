"""Exception types raised by provider dispatch and image orchestration."""

from typing import Optional


class ScriptGenError(Exception):
    """Base class for all generation failures."""


class UnsupportedProviderError(ScriptGenError, ValueError):
    """Raised when a provider id is not in the catalog or has no adapter."""

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"Provider {provider_id} is not supported")


class MissingCredentialError(ScriptGenError):
    """Raised before dispatch when no API key is stored for a provider."""

    def __init__(self, provider_id: str, key_name: str) -> None:
        self.provider_id = provider_id
        self.key_name = key_name
        super().__init__(
            f"No API key configured for {provider_id} (expected '{key_name}')"
        )


class ProviderError(ScriptGenError):
    """A provider call failed."""

    def __init__(self, provider_name: str, message: str) -> None:
        self.provider_name = provider_name
        super().__init__(message)


class ProviderHTTPError(ProviderError):
    """A provider answered with a non-success HTTP status."""

    def __init__(self, provider_name: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        status = f" (HTTP {status_code})" if status_code else ""
        super().__init__(
            provider_name,
            f"Error generating with {provider_name}{status}",
        )


class UnexpectedResponseError(ProviderError):
    """A provider answered successfully but the body lacks the expected field."""

    def __init__(self, provider_name: str, detail: str) -> None:
        self.detail = detail
        super().__init__(
            provider_name,
            f"Unexpected response from {provider_name}: {detail}",
        )


class ProviderTimeoutError(ProviderError):
    """An asynchronous provider job did not finish in time."""


class ProviderNotAvailableError(ProviderError):
    """The provider is registered but its integration is not wired yet."""
