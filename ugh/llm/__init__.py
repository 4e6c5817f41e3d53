"""LLM provider module for ugh.

This module provides a unified request/response interface to multiple LLM
providers. The active provider is configured through ugh.config.
"""

from dotenv import load_dotenv

from ugh.config import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_PROVIDER,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TEMPERATURE,
    LLMProvider,
)
from ugh.llm.base import BaseLLMProvider, RawLLMResult
from ugh.llm.exceptions import (
    DraftValidationError,
    JSONParseError,
    LLMError,
    LLMResponseError,
    LLMStatusError,
    LLMTransportError,
    MissingAPIKeyError,
)

# Load environment variables from .env file
load_dotenv()


def get_provider(
    provider: LLMProvider | None = None,
    model: str | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use. Defaults to DEFAULT_PROVIDER.
        model: The model to use. Defaults to the provider's default model.
        timeout: Request timeout in seconds.
        max_tokens: Output token budget.
        temperature: Sampling temperature.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    provider = provider or DEFAULT_PROVIDER
    kwargs = {"model": model, "timeout": timeout, "max_tokens": max_tokens, "temperature": temperature}

    if provider == LLMProvider.GOOGLE:
        from ugh.llm.google_provider import GoogleProvider

        return GoogleProvider(**kwargs)

    elif provider == LLMProvider.ANTHROPIC:
        from ugh.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(**kwargs)

    elif provider == LLMProvider.OPENAI:
        from ugh.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(**kwargs)

    elif provider == LLMProvider.OPENROUTER:
        from ugh.llm.openrouter_provider import OpenRouterProvider

        return OpenRouterProvider(**kwargs)

    elif provider == LLMProvider.GROQ:
        from ugh.llm.groq_provider import GroqProvider

        return GroqProvider(**kwargs)

    elif provider == LLMProvider.COHERE:
        from ugh.llm.cohere_provider import CohereProvider

        return CohereProvider(**kwargs)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "RawLLMResult",
    "LLMError",
    "MissingAPIKeyError",
    "LLMTransportError",
    "LLMStatusError",
    "LLMResponseError",
    "JSONParseError",
    "DraftValidationError",
    "get_provider",
]
