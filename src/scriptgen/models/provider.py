"""Provider descriptor model."""

from enum import Enum
from pydantic import BaseModel, Field


class ProviderKind(str, Enum):
    """Provider family."""
    TEXT = "text"
    IMAGE = "image"


class AIProvider(BaseModel):
    """A generative AI service reachable over HTTP."""

    id: str = Field(..., description="Stable provider identifier")
    name: str = Field(..., description="Display name")
    icon: str = Field(default="", description="Icon glyph")
    endpoint: str = Field(..., description="API base URL")
    key_name: str = Field(..., description="Credential storage key")
    api_key_url: str = Field(..., description="Where to obtain an API key")
    kind: ProviderKind = Field(default=ProviderKind.TEXT, description="Provider family")

    class Config:
        """Pydantic config."""
        frozen = True
