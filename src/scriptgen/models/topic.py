"""Topic item model."""

from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field, model_validator


class TopicState(str, Enum):
    """Image generation state of a topic."""
    UNSTARTED = "unstarted"
    LOADING = "loading"
    HAS_IMAGE = "has_image"
    HAS_ERROR = "has_error"


class TopicItem(BaseModel):
    """A topic extracted from a script and its generated image.

    Records are immutable; every state change produces a new record.
    """

    id: str = Field(..., description="Stable topic identifier")
    title: str = Field(..., description="Extracted heading or sentence")
    prompt: str = Field(default="", description="Image prompt, editable")
    image_url: Optional[str] = Field(None, description="Generated image URL")
    loading: bool = Field(default=False, description="Generation in flight")
    error: Optional[str] = Field(None, description="Last generation error")

    class Config:
        """Pydantic config."""
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _seed_prompt(cls, data):
        if isinstance(data, dict) and not data.get("prompt"):
            data = {**data, "prompt": data.get("title", "")}
        return data

    @property
    def state(self) -> TopicState:
        """Return the current state of the item."""
        if self.loading:
            return TopicState.LOADING
        if self.image_url:
            return TopicState.HAS_IMAGE
        if self.error:
            return TopicState.HAS_ERROR
        return TopicState.UNSTARTED
