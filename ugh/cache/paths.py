"""Cache file path utilities for ugh."""

from pathlib import Path

from ugh.global_config import get_global_config_dir

CACHE_FILE_NAME = "draft_cache.json"


def get_cache_file() -> Path:
    """Return path to the draft cache file in the ugh config directory.

    Returns:
        Path to draft_cache.json.
    """
    return get_global_config_dir() / CACHE_FILE_NAME
