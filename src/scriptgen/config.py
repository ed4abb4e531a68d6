"""Configuration management."""

import os
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration."""

    # Paths
    credentials_file: Path = Field(
        default_factory=lambda: Path(
            os.getenv("SCRIPTGEN_CREDENTIALS", "~/.scriptgen/credentials.yaml")
        ).expanduser(),
        description="YAML file holding provider API keys"
    )

    # HTTP
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("SCRIPTGEN_TIMEOUT", "120")),
        description="Timeout in seconds for provider requests"
    )

    # Text model settings
    gemini_model: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-pro"),
        description="Gemini model name"
    )
    openai_model: str = Field(
        default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-4"),
        description="OpenAI chat model name"
    )
    claude_model: str = Field(
        default_factory=lambda: os.getenv("CLAUDE_MODEL", "claude-3-sonnet-20240229"),
        description="Anthropic Claude model name"
    )
    grok_model: str = Field(
        default_factory=lambda: os.getenv("GROK_MODEL", "grok-beta"),
        description="xAI Grok model name"
    )
    mistral_model: str = Field(
        default_factory=lambda: os.getenv("MISTRAL_MODEL", "mistral-large-latest"),
        description="Mistral model name"
    )
    max_tokens: int = Field(default=2000, description="Completion token limit")
    temperature: float = Field(default=0.7, description="Sampling temperature")

    # Image settings
    leonardo_model_id: str = Field(
        default_factory=lambda: os.getenv(
            "LEONARDO_MODEL_ID", "6b645e3a-d64f-4341-a6d8-7a3690fbf042"
        ),
        description="Leonardo AI model id"
    )
    image_width: int = Field(default=1024, description="Generated image width")
    image_height: int = Field(default=576, description="Generated image height")
    leonardo_poll_interval: float = Field(
        default=2.0,
        description="Seconds between Leonardo generation status checks"
    )
    leonardo_max_poll_time: float = Field(
        default=120.0,
        description="Maximum seconds to wait for a Leonardo generation"
    )

    # Defaults
    default_provider: str = Field(
        default_factory=lambda: os.getenv("SCRIPTGEN_PROVIDER", "gemini"),
        description="Default text provider id"
    )
    default_image_provider: str = Field(
        default_factory=lambda: os.getenv("SCRIPTGEN_IMAGE_PROVIDER", "leonardo"),
        description="Default image provider id"
    )
    default_language: str = Field(
        default_factory=lambda: os.getenv("SCRIPTGEN_LANGUAGE", "en-US"),
        description="Default script language code"
    )

    class Config:
        """Pydantic config."""
        frozen = False

    def validate_timeouts(self) -> None:
        """Validate that timing settings are usable.

        Raises:
            ValueError: If any timing value is not positive.
        """
        invalid: list[str] = []

        if self.request_timeout <= 0:
            invalid.append("SCRIPTGEN_TIMEOUT")
        if self.leonardo_poll_interval <= 0:
            invalid.append("leonardo_poll_interval")
        if self.leonardo_max_poll_time <= 0:
            invalid.append("leonardo_max_poll_time")

        if invalid:
            raise ValueError(
                f"Timing settings must be positive: {', '.join(invalid)}"
            )


# Global config instance
config = Config()
