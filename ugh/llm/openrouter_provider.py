"""OpenRouter provider implementation.

OpenRouter provides unified access to 200+ models through a single API.
It uses an OpenAI-compatible API format.
"""

from openai import OpenAI

from ugh.config import LLMProvider
from ugh.llm.openai_provider import OpenAIProvider

# OpenRouter API base URL
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter LLM provider (unified access to 200+ models).

    Models use the provider/model-name format (e.g., openai/gpt-4o).
    """

    display_name = "OpenRouter"
    provider = LLMProvider.OPENROUTER

    def _create_client(self, api_key: str) -> OpenAI:
        return OpenAI(
            api_key=api_key,
            base_url=OPENROUTER_BASE_URL,
            timeout=self.timeout,
            max_retries=0,
        )

    def _extra_request_args(self) -> dict:
        return {
            "extra_headers": {
                "HTTP-Referer": "https://github.com/FilipKDick/ugh",
                "X-Title": "ugh",
            },
        }
