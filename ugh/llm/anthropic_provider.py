"""Anthropic Claude provider implementation."""

import anthropic
from anthropic import Anthropic

from ugh.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from ugh.llm.base import BaseLLMProvider, RawLLMResult, first_text
from ugh.llm.exceptions import (
    LLMError,
    LLMStatusError,
    LLMTransportError,
    MissingAPIKeyError,
)


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    display_name = "Anthropic"

    @classmethod
    def default_model(cls) -> str:
        return DEFAULT_MODELS[LLMProvider.ANTHROPIC]

    def get_api_key(self) -> str:
        """Get the Anthropic API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If ANTHROPIC_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[LLMProvider.ANTHROPIC], "Anthropic")

    def generate_raw(self, system_prompt: str, user_prompt: str) -> RawLLMResult:
        """Generate a raw response using Anthropic Claude."""
        api_key = self.get_api_key()

        try:
            # One attempt only
            client = Anthropic(api_key=api_key, timeout=self.timeout, max_retries=0)
            message = client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except MissingAPIKeyError:
            raise
        except anthropic.APIConnectionError as e:
            # Also covers APITimeoutError
            raise LLMTransportError(f"Anthropic request failed: {e}")
        except anthropic.APIStatusError as e:
            raise LLMStatusError(f"Anthropic returned status {e.status_code}: {e}", status_code=e.status_code)
        except Exception as e:
            raise LLMError(f"Anthropic API call failed: {e}")

        raw_response = first_text(
            (getattr(block, "text", None) for block in message.content or []),
            "Anthropic",
        )

        return RawLLMResult(
            raw_response=raw_response,
            model=self.model,
            input_tokens=message.usage.input_tokens if message.usage else 0,
            output_tokens=message.usage.output_tokens if message.usage else 0,
        )
