"""Exception classes shared across ugh.

Contains the error kinds surfaced to the user:
- UghError: Base exception for all ugh errors
- ConfigurationError: Missing required setting, corrupt config or cache file
- VersionControlError: An underlying repository operation failed
- IssueTrackerError: The tracker rejected the request or was unreachable
- LanguageModelError: A produced draft was structurally invalid
- StorageError: Filesystem access failure for config or cache
"""


class UghError(Exception):
    """Base exception for ugh errors."""

    pass


class ConfigurationError(UghError):
    """Raised when a required setting is missing or a persisted file is corrupt."""

    pass


class VersionControlError(UghError):
    """Raised when a version control operation fails."""

    pass


class IssueTrackerError(UghError):
    """Raised when the issue tracker rejects a request or cannot be reached."""

    pass


class LanguageModelError(UghError):
    """Raised when a ticket draft is structurally invalid."""

    pass


class StorageError(UghError):
    """Raised when the config or cache file cannot be read or written."""

    pass
