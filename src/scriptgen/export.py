"""Saving generated scripts and images to disk."""

import logging
import re
from pathlib import Path

import requests

from .config import config

logger = logging.getLogger(__name__)

_UNSAFE = re.compile(r"[^\w\-.]", re.UNICODE)


def script_filename(topic: str, provider_id: str) -> str:
    """Build the download file name for a script.

    Whitespace in the topic becomes `-` and path-unsafe characters are dropped.
    """
    slug = re.sub(r"\s+", "-", topic.strip())
    slug = _UNSAFE.sub("", slug).strip("-.") or "script"
    return f"script-{slug}-{provider_id}.txt"


def save_script(text: str, topic: str, provider_id: str, directory: Path) -> Path:
    """Write a script as a UTF-8 text file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / script_filename(topic, provider_id)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Saved script to {path}")
    return path


def download_image(url: str, output_path: Path) -> Path:
    """Download an image to `output_path`.

    Raises:
        requests.HTTPError: On a non-success status.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with requests.get(url, stream=True, timeout=config.request_timeout) as response:
        response.raise_for_status()
        with open(output_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
    logger.info(f"Saved image to {output_path}")
    return output_path
