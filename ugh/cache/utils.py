"""Cache utility functions for ugh."""

import hashlib
from typing import Optional


def compute_key(summary: str, files_changed: int, board: Optional[str] = None) -> str:
    """Compute the content-addressed key for a draft's generating input.

    Hashes the UTF-8 bytes of the summary, the decimal text of files_changed
    and, if present, the board. Fields are NUL-separated so that moving
    characters between fields changes the key.

    Args:
        summary: Change summary text.
        files_changed: Number of changed files.
        board: Board key, if any.

    Returns:
        SHA256 hex digest.
    """
    hasher = hashlib.sha256()
    hasher.update(summary.encode("utf-8"))
    hasher.update(b"\x00")
    hasher.update(str(files_changed).encode("utf-8"))
    if board is not None:
        hasher.update(b"\x00")
        hasher.update(board.encode("utf-8"))
    return hasher.hexdigest()
