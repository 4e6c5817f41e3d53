"""Cache data models for ugh.

Contains Pydantic models for the draft cache file:
- CacheEntry: One cached draft, keyed by the hash of its input
- CacheFile: Ordered entries, oldest first
"""

from pydantic import BaseModel, Field


class CacheEntry(BaseModel):
    """On-disk shadow of a TicketDraft."""

    key: str
    title: str
    description: str
    branch_category: str  # Canonical lowercase category
    branch_summary: str


class CacheFile(BaseModel):
    """Whole cache document; insertion order is recency order."""

    entries: list[CacheEntry] = Field(default_factory=list)
