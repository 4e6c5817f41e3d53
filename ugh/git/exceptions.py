"""Git-related exception classes."""

from ugh.errors import VersionControlError


class GitError(VersionControlError):
    """Custom exception for git-related errors."""

    pass
