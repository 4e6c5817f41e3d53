"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when API key is not set
- LLMTransportError: Raised on connection failures and timeouts
- LLMStatusError: Raised when the provider answers with a non-success status
- LLMResponseError: Raised when the response carries no usable text
- JSONParseError: Raised when LLM response cannot be parsed
- DraftValidationError: Raised when a parsed draft fails validation

Everything except MissingAPIKeyError is recovered by the draft generator.
"""

from typing import Optional

from ugh.errors import ConfigurationError


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError, ConfigurationError):
    """Raised when the required API key is not set."""

    pass


class LLMTransportError(LLMError):
    """Raised when the request could not be completed (network error or timeout)."""

    pass


class LLMStatusError(LLMError):
    """Raised when the provider responds with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LLMResponseError(LLMError):
    """Raised when the response envelope is unexpected or holds no text."""

    pass


class JSONParseError(LLMError):
    """Raised when the LLM response cannot be parsed as valid JSON."""

    pass


class DraftValidationError(LLMError):
    """Raised when a parsed draft has an invalid category or empty fields."""

    pass
