"""Script request model."""

from enum import Enum
from pydantic import BaseModel, Field, field_validator


class DurationBucket(str, Enum):
    """Target video length, in minutes."""
    SHORT = "1-3"
    MEDIUM = "3-5"
    STANDARD = "5-10"
    LONG = "10-15"
    EXTENDED = "15-20"
    FEATURE = "20+"


class VideoStyle(str, Enum):
    """Video style categories."""
    EDUCATIONAL = "educational"
    ENTERTAINMENT = "entertainment"
    TUTORIAL = "tutorial"
    REVIEW = "review"
    VLOG = "vlog"
    NEWS = "news"
    DOCUMENTARY = "documentary"
    STORYTELLING = "storytelling"


# Supported script languages, code -> display name
LANGUAGES = {
    "pt-BR": "Portuguese (Brazil)",
    "en-US": "English",
    "es-ES": "Spanish",
    "fr-FR": "French",
    "de-DE": "German",
    "it-IT": "Italian",
}


class ScriptData(BaseModel):
    """Parameters collected for one script request."""

    topic: str = Field(..., description="Video topic")
    duration: DurationBucket = Field(..., description="Target duration bucket")
    style: VideoStyle = Field(..., description="Video style")
    style_keywords: str = Field(default="", description="Free-form style hints")
    language: str = Field(default="en-US", description="Script language code")
    audience: str = Field(default="", description="Target audience")
    additional_info: str = Field(default="", description="Extra instructions")

    class Config:
        """Pydantic config."""
        frozen = False

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("topic must not be empty")
        return value

    @field_validator("language")
    @classmethod
    def _known_language(cls, value: str) -> str:
        if value not in LANGUAGES:
            raise ValueError(
                f"Unsupported language '{value}'. Choose one of: {', '.join(LANGUAGES)}"
            )
        return value

    @property
    def language_name(self) -> str:
        """Return the display name of the script language."""
        return LANGUAGES[self.language]
