"""YouTube script generator backed by multiple generative AI providers."""

__version__ = "0.1.0"
