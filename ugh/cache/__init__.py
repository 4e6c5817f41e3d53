"""Cache module for ugh.

This package provides a draft cache that prevents redundant LLM API calls:
- models: CacheEntry, CacheFile data models
- paths: Cache file location
- utils: Content-addressed key computation
- drafts: TicketDraftCache operations
"""

from ugh.cache.drafts import CACHE_LIMIT, TicketDraftCache
from ugh.cache.models import CacheEntry, CacheFile
from ugh.cache.paths import CACHE_FILE_NAME, get_cache_file
from ugh.cache.utils import compute_key


__all__ = [
    "CACHE_LIMIT",
    "CACHE_FILE_NAME",
    "CacheEntry",
    "CacheFile",
    "TicketDraftCache",
    "compute_key",
    "get_cache_file",
]
