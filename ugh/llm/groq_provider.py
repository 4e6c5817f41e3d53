"""Groq provider implementation."""

import groq
from groq import Groq

from ugh.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from ugh.llm.base import BaseLLMProvider, RawLLMResult, first_text
from ugh.llm.exceptions import (
    LLMError,
    LLMStatusError,
    LLMTransportError,
    MissingAPIKeyError,
)


class GroqProvider(BaseLLMProvider):
    """Groq LLM provider (fast inference for open-source models)."""

    display_name = "Groq"

    @classmethod
    def default_model(cls) -> str:
        return DEFAULT_MODELS[LLMProvider.GROQ]

    def get_api_key(self) -> str:
        """Get the Groq API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If GROQ_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[LLMProvider.GROQ], "Groq")

    def generate_raw(self, system_prompt: str, user_prompt: str) -> RawLLMResult:
        """Generate a raw response using Groq."""
        api_key = self.get_api_key()

        try:
            client = Groq(api_key=api_key, timeout=self.timeout, max_retries=0)
            # Call the Groq API (OpenAI-compatible)
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except MissingAPIKeyError:
            raise
        except groq.APIConnectionError as e:
            raise LLMTransportError(f"Groq request failed: {e}")
        except groq.APIStatusError as e:
            raise LLMStatusError(f"Groq returned status {e.status_code}: {e}", status_code=e.status_code)
        except Exception as e:
            raise LLMError(f"Groq API call failed: {e}")

        raw_response = first_text(
            (choice.message.content for choice in response.choices or [] if choice.message),
            "Groq",
        )

        return RawLLMResult(
            raw_response=raw_response,
            model=self.model,
            input_tokens=response.usage.prompt_tokens if response.usage else 0,
            output_tokens=response.usage.completion_tokens if response.usage else 0,
        )
