"""Per-topic image generation."""

import logging
from typing import Callable, Iterable, Optional

import requests

from .errors import ProviderNotAvailableError, ScriptGenError
from .models import TopicItem
from .services import ImageDispatcher
from .topics import extract_topics

logger = logging.getLogger(__name__)

Listener = Callable[[TopicItem], None]


class TopicImageOrchestrator:
    """Tracks the topics of a script and generates one image per topic.

    Items live in an ordered arena keyed by a stable id. Every state change
    replaces the whole record, and the optional listener sees each new record.
    Generation runs one item at a time.
    """

    def __init__(
        self,
        provider_id: str,
        dispatcher: Optional[ImageDispatcher] = None,
        listener: Optional[Listener] = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            provider_id: Image provider id from the catalog.
            dispatcher: Image dispatcher. Created if not provided.
            listener: Called with every replaced item.
        """
        self._dispatcher = dispatcher or ImageDispatcher()
        # Fail early on an unknown provider
        self._provider = self._dispatcher.adapter_for(provider_id).provider
        self._listener = listener
        self._items: dict[str, TopicItem] = {}

    @property
    def provider_id(self) -> str:
        """Return the image provider id."""
        return self._provider.id

    @property
    def items(self) -> list[TopicItem]:
        """Return the items in extraction order."""
        return list(self._items.values())

    def get(self, item_id: str) -> TopicItem:
        """Return one item.

        Raises:
            KeyError: If the id is unknown.
        """
        return self._items[item_id]

    def load_script(self, script: str) -> list[TopicItem]:
        """Replace all items with the topics extracted from `script`."""
        self._items = {}
        for idx, title in enumerate(extract_topics(script)):
            item = TopicItem(id=f"topic-{idx}", title=title, prompt=title)
            self._items[item.id] = item
        logger.info(f"Extracted {len(self._items)} topics")
        return self.items

    def load_items(self, items: Iterable[TopicItem]) -> list[TopicItem]:
        """Replace all items with previously saved ones. Loading flags are cleared."""
        self._items = {item.id: item.model_copy(update={"loading": False}) for item in items}
        return self.items

    def update_prompt(self, item_id: str, prompt: str) -> TopicItem:
        """Set the image prompt of one item."""
        return self._replace(self.get(item_id), prompt=prompt)

    def _replace(self, item: TopicItem, **changes) -> TopicItem:
        new_item = item.model_copy(update=changes)
        self._items[item.id] = new_item
        if self._listener:
            self._listener(new_item)
        return new_item

    def generate_one(self, item_id: str) -> TopicItem:
        """Generate the image of one item.

        Generation failures are stored in the item's error field and never
        raised. A missing API key is raised before the item changes so the
        caller can ask for one.

        Raises:
            KeyError: If the id is unknown.
            MissingCredentialError: If the provider needs a key and none is stored.
        """
        item = self.get(item_id)
        adapter = self._dispatcher.adapter_for(self._provider.id)

        try:
            adapter.check_available()
        except ProviderNotAvailableError as e:
            logger.warning(str(e))
            return self._replace(item, loading=False, image_url=None, error=str(e))

        api_key = None
        if adapter.requires_credential:
            api_key = self._dispatcher.resolve_credential(self._provider, None)

        item = self._replace(item, loading=True, image_url=None, error=None)
        try:
            image_url = self._dispatcher.generate_image(
                self._provider.id, item.prompt, api_key
            )
        except (ScriptGenError, requests.RequestException) as e:
            logger.error(f"Image generation failed for '{item.title}': {e}")
            return self._replace(item, loading=False, error=str(e) or "Error")

        logger.info(f"Generated image for '{item.title}'")
        return self._replace(item, loading=False, image_url=image_url, error=None)

    def generate_all(self) -> list[TopicItem]:
        """Generate images for every item that has none, in order.

        Items that already hold an image URL are skipped, so calling this
        again only retries what is still missing.
        """
        for item_id in list(self._items):
            if self._items[item_id].image_url:
                continue
            self.generate_one(item_id)
        return self.items
