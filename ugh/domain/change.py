"""Snapshot of local, uncommitted changes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeSummary:
    """Files changed in the working tree and a free-form description of them."""

    files_changed: int
    summary: str

    @classmethod
    def empty(cls) -> "ChangeSummary":
        """Return the summary reported when there are no local changes."""
        return cls(files_changed=0, summary="")
