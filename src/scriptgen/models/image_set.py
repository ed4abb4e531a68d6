"""Image set data model."""

import hashlib
from typing import List, Optional
from pathlib import Path
from pydantic import BaseModel, Field
import yaml

from .topic import TopicItem


class ImageSet(BaseModel):
    """Topic images generated for one script."""

    script_file: Optional[str] = Field(None, description="Path to the source script")
    script_hash: Optional[str] = Field(None, description="SHA-256 of the source script text")
    provider: str = Field(..., description="Image provider id")
    items: List[TopicItem] = Field(default_factory=list, description="Topic items")

    class Config:
        """Pydantic config."""
        frozen = False

    @staticmethod
    def fingerprint(script: str) -> str:
        """Return the hash identifying a script text."""
        return hashlib.sha256(script.encode("utf-8")).hexdigest()

    def matches(self, script: str, provider: str) -> bool:
        """Return True if this set was generated from `script` with `provider`."""
        return self.provider == provider and self.script_hash == self.fingerprint(script)

    @classmethod
    def from_yaml(cls, path: Path) -> "ImageSet":
        """Load image set from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls(**data)

    def to_yaml(self, path: Path) -> None:
        """Save image set to YAML file."""
        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, default_flow_style=False)
