"""Ticket draft cache for ugh.

A bounded, content-addressed store of previously produced drafts. Eviction
is FIFO by insertion: a cache hit does not move an entry, only re-inserting
a key does.
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ugh.cache.models import CacheEntry, CacheFile
from ugh.cache.paths import get_cache_file
from ugh.cache.utils import compute_key
from ugh.domain import BranchCategory, TicketDraft
from ugh.errors import ConfigurationError, StorageError

CACHE_LIMIT = 32


class TicketDraftCache:
    """In-memory view of the draft cache file.

    Loaded once per run, mutated in memory and saved wholesale.
    """

    def __init__(self, file_path: Path, file: Optional[CacheFile] = None):
        self.file_path = file_path
        self.file = file or CacheFile()

    compute_key = staticmethod(compute_key)

    @classmethod
    def load(cls, file_path: Optional[Path] = None) -> "TicketDraftCache":
        """Read the cache file.

        Args:
            file_path: Cache file location. Defaults to the config directory.

        Returns:
            The loaded cache; empty if the file does not exist.

        Raises:
            ConfigurationError: If the file exists but is corrupt.
            StorageError: If the file cannot be read.
        """
        path = file_path or get_cache_file()

        try:
            contents = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls(path)
        except OSError as e:
            raise StorageError(f"Failed to read cache file {path}: {e}")
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"invalid cache file {path}: {e}")

        try:
            file = CacheFile.model_validate(json.loads(contents))
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigurationError(f"invalid cache file {path}: {e}")
        except RecursionError:
            raise ConfigurationError(f"invalid cache file {path}: nested too deeply")

        return cls(path, file)

    def __len__(self) -> int:
        return len(self.file.entries)

    def keys(self) -> list[str]:
        """Return cached keys, oldest first."""
        return [entry.key for entry in self.file.entries]

    def get(self, key: str) -> Optional[TicketDraft]:
        """Look up a draft by key.

        Unknown category strings decode to FEATURE.

        Returns:
            The cached draft, or None on a miss.
        """
        for entry in self.file.entries:
            if entry.key == key:
                return TicketDraft(
                    title=entry.title,
                    description=entry.description,
                    branch_category=BranchCategory.parse(entry.branch_category) or BranchCategory.FEATURE,
                    branch_summary=entry.branch_summary,
                )
        return None

    def insert(self, key: str, draft: TicketDraft) -> None:
        """Store a draft as the most recent entry, evicting the oldest beyond CACHE_LIMIT."""
        entries = [entry for entry in self.file.entries if entry.key != key]
        entries.append(
            CacheEntry(
                key=key,
                title=draft.title,
                description=draft.description,
                branch_category=draft.branch_category.as_str(),
                branch_summary=draft.branch_summary,
            )
        )

        # Trim from the front (oldest)
        if len(entries) > CACHE_LIMIT:
            entries = entries[len(entries) - CACHE_LIMIT:]

        self.file.entries = entries

    def save(self) -> None:
        """Overwrite the cache file with every entry, creating parent directories.

        Raises:
            StorageError: If the file cannot be written.
        """
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(self.file.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write cache file {self.file_path}: {e}")
