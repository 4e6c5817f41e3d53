"""Google Gemini provider implementation."""

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ugh.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider
from ugh.llm.base import BaseLLMProvider, RawLLMResult, first_text
from ugh.llm.exceptions import (
    LLMError,
    LLMResponseError,
    LLMStatusError,
    LLMTransportError,
    MissingAPIKeyError,
)

# Models that have built-in "thinking" which consumes output tokens
# These models use internal reasoning that counts against max_output_tokens
# even without explicit thinking config, so we need a higher budget
THINKING_MODELS = [
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-2.0-flash-thinking",
]

# Multiplier for max_output_tokens on thinking models
THINKING_TOKEN_MULTIPLIER = 3


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    display_name = "Google"

    @classmethod
    def default_model(cls) -> str:
        return DEFAULT_MODELS[LLMProvider.GOOGLE]

    def get_api_key(self) -> str:
        """Get the Google API key from environment or credentials file.

        Raises:
            MissingAPIKeyError: If GOOGLE_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(API_KEY_ENV_VARS[LLMProvider.GOOGLE], "Google")

    def _is_thinking_model(self) -> bool:
        """Check if the current model is a thinking model."""
        return any(thinking_model in self.model.lower() for thinking_model in THINKING_MODELS)

    def generate_raw(self, system_prompt: str, user_prompt: str) -> RawLLMResult:
        """Generate a raw response using Google Gemini."""
        api_key = self.get_api_key()

        effective_max_tokens = self.max_tokens
        if self._is_thinking_model():
            effective_max_tokens = self.max_tokens * THINKING_TOKEN_MULTIPLIER

        try:
            # HttpOptions.timeout is in milliseconds
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout * 1000)),
            )
            response = client.models.generate_content(
                model=self.model,
                contents=user_prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_prompt,
                    max_output_tokens=effective_max_tokens,
                    temperature=self.temperature,
                    response_mime_type="application/json",
                ),
            )
        except MissingAPIKeyError:
            raise
        except genai_errors.APIError as e:
            raise LLMStatusError(f"Google Gemini returned status {e.code}: {e.message}", status_code=e.code)
        except httpx.TimeoutException as e:
            raise LLMTransportError(f"Google Gemini request timed out after {self.timeout}s: {e}")
        except httpx.TransportError as e:
            raise LLMTransportError(f"Google Gemini request failed: {e}")
        except Exception as e:
            raise LLMError(f"Google Gemini API call failed: {e}")

        # Check if response has candidates
        if not response.candidates:
            raise LLMResponseError("Google Gemini returned no candidates in response")

        candidate = response.candidates[0]
        if candidate.finish_reason is not None and "SAFETY" in str(candidate.finish_reason):
            raise LLMResponseError(f"Google Gemini blocked response: {candidate.finish_reason}")

        parts = candidate.content.parts if candidate.content and candidate.content.parts else []
        raw_response = first_text((part.text for part in parts), "Google Gemini")

        # Get token counts from usage metadata
        input_tokens = 0
        output_tokens = 0
        usage = response.usage_metadata
        if usage:
            input_tokens = usage.prompt_token_count or 0
            # Thinking tokens consume the output budget
            output_tokens = (usage.candidates_token_count or 0) + (usage.thoughts_token_count or 0)

        return RawLLMResult(
            raw_response=raw_response,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
