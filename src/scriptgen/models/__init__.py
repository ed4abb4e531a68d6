"""Data models for the script generator."""

from .script import ScriptData, DurationBucket, VideoStyle, LANGUAGES
from .provider import AIProvider, ProviderKind
from .topic import TopicItem, TopicState
from .image_set import ImageSet

__all__ = [
    "ScriptData",
    "DurationBucket",
    "VideoStyle",
    "LANGUAGES",
    "AIProvider",
    "ProviderKind",
    "TopicItem",
    "TopicState",
    "ImageSet",
]
