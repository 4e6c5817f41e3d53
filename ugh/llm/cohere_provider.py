"""Cohere provider implementation."""

import cohere
import httpx
from cohere.core.api_error import ApiError

from ugh.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from ugh.llm.base import BaseLLMProvider, RawLLMResult, first_text
from ugh.llm.exceptions import (
    LLMError,
    LLMStatusError,
    LLMTransportError,
    MissingAPIKeyError,
)


class CohereProvider(BaseLLMProvider):
    """Cohere LLM provider."""

    display_name = "Cohere"

    @classmethod
    def default_model(cls) -> str:
        return DEFAULT_MODELS[LLMProvider.COHERE]

    def get_api_key(self) -> str:
        """Get the Cohere API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If COHERE_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[LLMProvider.COHERE], "Cohere")

    def generate_raw(self, system_prompt: str, user_prompt: str) -> RawLLMResult:
        """Generate a raw response using Cohere."""
        api_key = self.get_api_key()

        try:
            client = cohere.ClientV2(api_key=api_key, timeout=self.timeout)
            response = client.chat(
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
        except ApiError as e:
            raise LLMStatusError(f"Cohere returned status {e.status_code}: {e.body}", status_code=e.status_code)
        except httpx.TransportError as e:
            # Also covers timeouts
            raise LLMTransportError(f"Cohere request failed: {e}")
        except Exception as e:
            raise LLMError(f"Cohere API call failed: {e}")

        content = response.message.content if response.message and response.message.content else []
        raw_response = first_text((getattr(item, "text", None) for item in content), "Cohere")

        input_tokens = 0
        output_tokens = 0
        if response.usage and response.usage.tokens:
            input_tokens = int(response.usage.tokens.input_tokens or 0)
            output_tokens = int(response.usage.tokens.output_tokens or 0)

        return RawLLMResult(
            raw_response=raw_response,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
