"""OpenAI GPT provider implementation."""

import openai
from openai import OpenAI

from ugh.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from ugh.llm.base import BaseLLMProvider, RawLLMResult, first_text
from ugh.llm.exceptions import (
    LLMError,
    LLMStatusError,
    LLMTransportError,
    MissingAPIKeyError,
)


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    display_name = "OpenAI"
    provider = LLMProvider.OPENAI

    @classmethod
    def default_model(cls) -> str:
        return DEFAULT_MODELS[cls.provider]

    def get_api_key(self) -> str:
        """Get the API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If the provider's API key is not found.
        """
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[self.provider], self.display_name)

    def _create_client(self, api_key: str) -> OpenAI:
        return OpenAI(api_key=api_key, timeout=self.timeout, max_retries=0)

    def _extra_request_args(self) -> dict:
        return {}

    def generate_raw(self, system_prompt: str, user_prompt: str) -> RawLLMResult:
        """Generate a raw response through the chat completions API."""
        api_key = self.get_api_key()

        try:
            client = self._create_client(api_key)
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                **self._extra_request_args(),
            )
        except MissingAPIKeyError:
            raise
        except openai.APIConnectionError as e:
            # Also covers APITimeoutError
            raise LLMTransportError(f"{self.display_name} request failed: {e}")
        except openai.APIStatusError as e:
            raise LLMStatusError(
                f"{self.display_name} returned status {e.status_code}: {e}",
                status_code=e.status_code,
            )
        except Exception as e:
            raise LLMError(f"{self.display_name} API call failed: {e}")

        raw_response = first_text(
            (choice.message.content for choice in response.choices or [] if choice.message),
            self.display_name,
        )

        return RawLLMResult(
            raw_response=raw_response,
            model=self.model,
            input_tokens=response.usage.prompt_tokens if response.usage else 0,
            output_tokens=response.usage.completion_tokens if response.usage else 0,
        )
