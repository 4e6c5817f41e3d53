"""Base classes and shared utilities for LLM providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional

from ugh.config import DEFAULT_MAX_TOKENS, DEFAULT_REQUEST_TIMEOUT, DEFAULT_TEMPERATURE
from ugh.llm.exceptions import LLMResponseError, MissingAPIKeyError


@dataclass
class RawLLMResult:
    """Raw text returned by an LLM call, including token usage."""

    raw_response: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


def first_text(parts: Iterable[Optional[str]], provider_name: str) -> str:
    """Return the first non-empty text part of a response.

    Args:
        parts: Candidate text parts, in response order.
        provider_name: Human-readable provider name for error messages.

    Returns:
        The first text part that is not blank.

    Raises:
        LLMResponseError: If no part carries text.
    """
    for text in parts:
        if isinstance(text, str) and text.strip():
            return text
    raise LLMResponseError(f"{provider_name} returned empty response")


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    # Human-readable name used in error messages
    display_name: str = "LLM"

    def __init__(
        self,
        model: str | None = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        """Initialize the provider.

        Args:
            model: The model to use. Defaults to the provider's default model.
            timeout: Request timeout in seconds.
            max_tokens: Output token budget.
            temperature: Sampling temperature.
        """
        self.model = model or self.default_model()
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature

    @classmethod
    def default_model(cls) -> str:
        return ""

    @abstractmethod
    def generate_raw(self, system_prompt: str, user_prompt: str) -> RawLLMResult:
        """Send one system instruction and one user prompt, returning the raw text.

        Args:
            system_prompt: The system instruction.
            user_prompt: The user prompt.

        Returns:
            A RawLLMResult containing the raw response and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMTransportError: On connection failure or timeout.
            LLMStatusError: On a non-success response status.
            LLMResponseError: If the response holds no text.
            LLMError: For other LLM-related errors.
        """
        pass

    @abstractmethod
    def get_api_key(self) -> str:
        """Get the API key from environment or credentials file.

        Checks in order:
        1. Environment variable
        2. credentials file in the ugh config directory
        3. Repo-level .env file (if loaded)

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        pass

    def _get_api_key_with_fallback(self, env_var_name: str, provider_name: str) -> str:
        """Helper to get API key with fallback to credentials file.

        Args:
            env_var_name: Environment variable name to check.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        # First check environment variable
        api_key = os.getenv(env_var_name)
        if api_key and api_key.strip():
            return api_key.strip()

        # Then check credentials file
        from ugh.global_config import get_credential

        api_key = get_credential(env_var_name)
        if api_key:
            return api_key

        # Not found anywhere
        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var_name}=your_key_here\n"
            f"  2. Run: ugh config set-key {provider_name.lower()}\n"
            f"  3. Manually add to the ugh credentials file"
        )
