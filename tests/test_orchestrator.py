"""Tests for per-topic image generation."""

import pytest
import requests

from scriptgen.errors import MissingCredentialError, ProviderHTTPError, UnsupportedProviderError
from scriptgen.models import TopicState
from scriptgen.orchestrator import TopicImageOrchestrator
from scriptgen.services import ImageDispatcher

SCRIPT = "1. Intro\n2. Main Point\n3. Outro"


class FakeImageDispatcher(ImageDispatcher):
    """Image dispatcher that records prompts instead of calling a provider."""

    def __init__(self, credentials, failures=None):
        super().__init__(credentials)
        self.prompts = []
        self.failures = dict(failures or {})

    def generate_image(self, provider_id, prompt, api_key=None):
        self.prompts.append(prompt)
        failure = self.failures.pop(prompt, None)
        if failure:
            raise failure
        return f"https://images.example/{prompt.replace(' ', '_')}.png"


@pytest.fixture
def dispatcher(store):
    store.set("leonardo_api_key", "leo-key")
    return FakeImageDispatcher(store)


@pytest.fixture
def seen():
    return []


@pytest.fixture
def orchestrator(dispatcher, seen):
    orch = TopicImageOrchestrator("leonardo", dispatcher=dispatcher, listener=seen.append)
    orch.load_script(SCRIPT)
    seen.clear()
    return orch


def test_load_script_seeds_items(orchestrator):
    items = orchestrator.items

    assert [i.id for i in items] == ["topic-0", "topic-1", "topic-2"]
    assert [i.title for i in items] == ["Intro", "Main Point", "Outro"]
    assert all(i.prompt == i.title for i in items)
    assert all(i.state == TopicState.UNSTARTED for i in items)


def test_generate_all_runs_once_per_topic_in_order(orchestrator, dispatcher):
    items = orchestrator.generate_all()

    assert dispatcher.prompts == ["Intro", "Main Point", "Outro"]
    assert all(i.state == TopicState.HAS_IMAGE for i in items)
    assert items[1].image_url == "https://images.example/Main_Point.png"


def test_generate_all_is_idempotent(orchestrator, dispatcher):
    orchestrator.generate_all()
    dispatcher.prompts.clear()

    orchestrator.generate_all()

    assert dispatcher.prompts == []


def test_generate_all_skips_items_with_images(orchestrator, dispatcher):
    orchestrator.generate_one("topic-1")
    dispatcher.prompts.clear()

    orchestrator.generate_all()

    assert dispatcher.prompts == ["Intro", "Outro"]


def test_failure_is_captured_per_item(store, seen):
    store.set("leonardo_api_key", "leo-key")
    dispatcher = FakeImageDispatcher(
        store, failures={"Main Point": ProviderHTTPError("Leonardo AI", 500)}
    )
    orch = TopicImageOrchestrator("leonardo", dispatcher=dispatcher)
    orch.load_script(SCRIPT)

    items = orch.generate_all()

    assert [i.state for i in items] == [
        TopicState.HAS_IMAGE,
        TopicState.HAS_ERROR,
        TopicState.HAS_IMAGE,
    ]
    failed = items[1]
    assert "Leonardo AI" in failed.error
    assert failed.image_url is None
    assert failed.loading is False


def test_transport_errors_are_captured(store):
    store.set("leonardo_api_key", "leo-key")
    dispatcher = FakeImageDispatcher(
        store, failures={"Intro": requests.ConnectionError("connection refused")}
    )
    orch = TopicImageOrchestrator("leonardo", dispatcher=dispatcher)
    orch.load_script(SCRIPT)

    item = orch.generate_one("topic-0")

    assert item.state == TopicState.HAS_ERROR
    assert "connection refused" in item.error


def test_state_transitions_and_retry_from_error(store):
    store.set("leonardo_api_key", "leo-key")
    seen = []
    dispatcher = FakeImageDispatcher(
        store, failures={"Intro": ProviderHTTPError("Leonardo AI", 503)}
    )
    orch = TopicImageOrchestrator("leonardo", dispatcher=dispatcher, listener=seen.append)
    orch.load_script(SCRIPT)

    orch.generate_one("topic-0")
    orch.generate_one("topic-0")

    assert [i.state for i in seen] == [
        TopicState.LOADING,
        TopicState.HAS_ERROR,
        TopicState.LOADING,
        TopicState.HAS_IMAGE,
    ]
    assert seen[2].error is None
    assert orch.get("topic-0").error is None


def test_edited_prompt_is_used(orchestrator, dispatcher):
    orchestrator.update_prompt("topic-2", "A closing shot of a sunset")

    item = orchestrator.generate_one("topic-2")

    assert dispatcher.prompts == ["A closing shot of a sunset"]
    assert item.title == "Outro"
    assert item.prompt == "A closing shot of a sunset"


def test_records_are_replaced_not_mutated(orchestrator):
    before = orchestrator.get("topic-0")

    orchestrator.generate_one("topic-0")

    assert before.image_url is None
    assert orchestrator.get("topic-0") is not before


def test_stub_provider_goes_straight_to_error(store, seen):
    orch = TopicImageOrchestrator("kling", dispatcher=ImageDispatcher(store), listener=seen.append)
    orch.load_script(SCRIPT)

    item = orch.generate_one("topic-0")

    assert item.state == TopicState.HAS_ERROR
    assert "coming soon" in item.error
    assert all(i.state != TopicState.LOADING for i in seen)


def test_missing_credential_leaves_item_untouched(store, seen):
    dispatcher = FakeImageDispatcher(store)
    orch = TopicImageOrchestrator("leonardo", dispatcher=dispatcher, listener=seen.append)
    orch.load_script(SCRIPT)

    with pytest.raises(MissingCredentialError):
        orch.generate_one("topic-0")

    assert orch.get("topic-0").state == TopicState.UNSTARTED
    assert dispatcher.prompts == []
    assert seen == []


def test_unknown_item_id(orchestrator):
    with pytest.raises(KeyError):
        orchestrator.generate_one("topic-99")


def test_unknown_provider(store):
    with pytest.raises(UnsupportedProviderError):
        TopicImageOrchestrator("unknown-id", dispatcher=ImageDispatcher(store))


def test_load_items_clears_loading(orchestrator):
    stuck = orchestrator.get("topic-0").model_copy(update={"loading": True})

    items = orchestrator.load_items([stuck])

    assert items[0].loading is False
    assert items[0].state == TopicState.UNSTARTED


def test_load_script_replaces_items(orchestrator):
    orchestrator.load_script("# Only heading")

    assert [i.title for i in orchestrator.items] == ["Only heading"]
