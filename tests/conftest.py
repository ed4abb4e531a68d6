"""Shared test fixtures."""

from typing import Any

import pytest

from scriptgen.config import config
from scriptgen.credentials import CredentialStore
from scriptgen.models import DurationBucket, ScriptData, VideoStyle
from scriptgen.providers import PROVIDERS


class FakeResponse:
    """Minimal stand-in for `requests.Response`."""

    def __init__(self, status_code: int = 200, json_data: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._json = json_data
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json


class RequestRecorder:
    """Records calls and replays queued responses."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[FakeResponse] = []

    def queue(self, *responses: FakeResponse) -> "RequestRecorder":
        self.responses.extend(responses)
        return self

    def __call__(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        return self.responses.pop(0)


@pytest.fixture(autouse=True)
def isolated_credentials(monkeypatch, tmp_path):
    """Keep tests away from real keys in the environment or home directory."""
    for provider in PROVIDERS:
        monkeypatch.delenv(provider.key_name.upper(), raising=False)
    monkeypatch.setattr(config, "credentials_file", tmp_path / "credentials.yaml")


@pytest.fixture
def store(tmp_path) -> CredentialStore:
    return CredentialStore(tmp_path / "credentials.yaml")


@pytest.fixture
def script_data() -> ScriptData:
    return ScriptData(
        topic="How solar panels work",
        duration=DurationBucket.STANDARD,
        style=VideoStyle.EDUCATIONAL,
        style_keywords="clear, upbeat",
        language="en-US",
        audience="high school students",
        additional_info="Mention home installations",
    )


@pytest.fixture
def recorder() -> RequestRecorder:
    return RequestRecorder()

