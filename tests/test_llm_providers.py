"""Tests for ugh.llm providers."""

from types import SimpleNamespace

import anthropic
import httpx
import openai
import pytest

from ugh import global_config
from ugh.config import DEFAULT_MODELS, LLMProvider
from ugh.errors import ConfigurationError
from ugh.llm import (
    LLMError,
    LLMResponseError,
    LLMStatusError,
    LLMTransportError,
    MissingAPIKeyError,
    get_provider,
)
from ugh.llm.anthropic_provider import AnthropicProvider
from ugh.llm.base import first_text
from ugh.llm.cohere_provider import CohereProvider
from ugh.llm.google_provider import GoogleProvider
from ugh.llm.groq_provider import GroqProvider
from ugh.llm.openai_provider import OpenAIProvider
from ugh.llm.openrouter_provider import OPENROUTER_BASE_URL, OpenRouterProvider


class TestGetProvider:
    """Tests for get_provider factory function."""

    @pytest.mark.parametrize("provider,cls", [
        (LLMProvider.GOOGLE, GoogleProvider),
        (LLMProvider.ANTHROPIC, AnthropicProvider),
        (LLMProvider.OPENAI, OpenAIProvider),
        (LLMProvider.OPENROUTER, OpenRouterProvider),
        (LLMProvider.GROQ, GroqProvider),
        (LLMProvider.COHERE, CohereProvider),
    ])
    def test_returns_provider(self, provider, cls):
        """Test that each provider maps to its class and default model."""
        instance = get_provider(provider)

        assert type(instance) is cls
        assert instance.model == DEFAULT_MODELS[provider]

    def test_defaults_to_google(self):
        """Test the default provider."""
        assert isinstance(get_provider(), GoogleProvider)

    def test_passes_settings(self):
        """Test model and request settings."""
        instance = get_provider(LLMProvider.OPENAI, model="gpt-4o", timeout=5.0, max_tokens=256, temperature=0.0)

        assert instance.model == "gpt-4o"
        assert instance.timeout == 5.0
        assert instance.max_tokens == 256
        assert instance.temperature == 0.0

    def test_unsupported_provider(self):
        """Test that unknown values are rejected."""
        with pytest.raises(ValueError, match="Unsupported provider"):
            get_provider("mistral")


class TestApiKeys:
    """Tests for API key lookup."""

    def test_missing_key(self):
        """Test that no key anywhere raises MissingAPIKeyError."""
        with pytest.raises(MissingAPIKeyError, match="GOOGLE_API_KEY") as exc_info:
            GoogleProvider().get_api_key()

        assert isinstance(exc_info.value, ConfigurationError)

    def test_env_key(self, monkeypatch):
        """Test the environment variable."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", " env-key ")
        assert AnthropicProvider().get_api_key() == "env-key"

    def test_credentials_key(self):
        """Test the credentials file fallback."""
        global_config.save_credential("OPENROUTER_API_KEY", "stored-key")
        assert OpenRouterProvider().get_api_key() == "stored-key"

    def test_missing_key_stops_before_request(self, mocker):
        """Test that no client is built without a key."""
        mock_client = mocker.patch("ugh.llm.openai_provider.OpenAI")

        with pytest.raises(MissingAPIKeyError):
            OpenAIProvider().generate_raw("system", "user")

        mock_client.assert_not_called()


class TestFirstText:
    """Tests for first_text function."""

    def test_skips_empty_parts(self):
        """Test that blank and missing parts are skipped."""
        assert first_text([None, "", "  ", '{"a": 1}', "later"], "Test") == '{"a": 1}'

    def test_no_text(self):
        """Test that an all-empty response raises."""
        with pytest.raises(LLMResponseError, match="Test returned empty response"):
            first_text([None, " "], "Test")


class TestAnthropicProvider:
    """Tests for AnthropicProvider.generate_raw."""

    @pytest.fixture(autouse=True)
    def api_key(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")

    def test_success(self, mocker):
        """Test text and usage extraction."""
        mock_cls = mocker.patch("ugh.llm.anthropic_provider.Anthropic")
        mock_cls.return_value.messages.create.return_value = SimpleNamespace(
            content=[SimpleNamespace(text='{"title": "x"}')],
            usage=SimpleNamespace(input_tokens=12, output_tokens=7),
        )

        result = AnthropicProvider(timeout=9.0).generate_raw("system", "user")

        assert result.raw_response == '{"title": "x"}'
        assert result.input_tokens == 12
        assert result.output_tokens == 7
        mock_cls.assert_called_once_with(api_key="test-key", timeout=9.0, max_retries=0)

    def test_connection_error(self, mocker):
        """Test mapping of connection failures."""
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        mock_cls = mocker.patch("ugh.llm.anthropic_provider.Anthropic")
        mock_cls.return_value.messages.create.side_effect = anthropic.APIConnectionError(request=request)

        with pytest.raises(LLMTransportError):
            AnthropicProvider().generate_raw("system", "user")

    def test_status_error(self, mocker):
        """Test mapping of non-success statuses."""
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        response = httpx.Response(529, request=request)
        mock_cls = mocker.patch("ugh.llm.anthropic_provider.Anthropic")
        mock_cls.return_value.messages.create.side_effect = anthropic.APIStatusError(
            "overloaded", response=response, body=None
        )

        with pytest.raises(LLMStatusError) as exc_info:
            AnthropicProvider().generate_raw("system", "user")

        assert exc_info.value.status_code == 529


class TestOpenAIProvider:
    """Tests for OpenAIProvider and OpenRouterProvider."""

    @pytest.fixture(autouse=True)
    def api_keys(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "openai-key")
        monkeypatch.setenv("OPENROUTER_API_KEY", "openrouter-key")

    def make_response(self, content):
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
            usage=SimpleNamespace(prompt_tokens=3, completion_tokens=4),
        )

    def test_success(self, mocker):
        """Test the chat completion request."""
        mock_cls = mocker.patch("ugh.llm.openai_provider.OpenAI")
        mock_create = mock_cls.return_value.chat.completions.create
        mock_create.return_value = self.make_response('{"title": "x"}')

        result = OpenAIProvider(model="gpt-4o").generate_raw("system", "user")

        assert result.raw_response == '{"title": "x"}'
        assert result.model == "gpt-4o"
        messages = mock_create.call_args.kwargs["messages"]
        assert messages == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    def test_empty_content(self, mocker):
        """Test that an empty answer raises LLMResponseError."""
        mock_cls = mocker.patch("ugh.llm.openai_provider.OpenAI")
        mock_cls.return_value.chat.completions.create.return_value = self.make_response(None)

        with pytest.raises(LLMResponseError):
            OpenAIProvider().generate_raw("system", "user")

    def test_timeout(self, mocker):
        """Test mapping of timeouts."""
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        mock_cls = mocker.patch("ugh.llm.openai_provider.OpenAI")
        mock_cls.return_value.chat.completions.create.side_effect = openai.APITimeoutError(request=request)

        with pytest.raises(LLMTransportError):
            OpenAIProvider().generate_raw("system", "user")

    def test_openrouter_client(self, mocker):
        """Test that OpenRouter uses its base URL and headers."""
        mock_cls = mocker.patch("ugh.llm.openrouter_provider.OpenAI")
        mock_create = mock_cls.return_value.chat.completions.create
        mock_create.return_value = self.make_response('{"title": "x"}')

        OpenRouterProvider().generate_raw("system", "user")

        assert mock_cls.call_args.kwargs["base_url"] == OPENROUTER_BASE_URL
        assert mock_cls.call_args.kwargs["api_key"] == "openrouter-key"
        assert mock_create.call_args.kwargs["extra_headers"]["X-Title"] == "ugh"


class TestGoogleProvider:
    """Tests for GoogleProvider.generate_raw."""

    @pytest.fixture(autouse=True)
    def api_key(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_API_KEY", "google-key")

    def test_no_candidates(self, mocker):
        """Test that an empty candidate list raises LLMResponseError."""
        mock_client = mocker.patch("ugh.llm.google_provider.genai.Client")
        mock_client.return_value.models.generate_content.return_value = SimpleNamespace(
            candidates=[], usage_metadata=None
        )

        with pytest.raises(LLMResponseError, match="no candidates"):
            GoogleProvider().generate_raw("system", "user")

    def test_success(self, mocker):
        """Test text and token extraction."""
        candidate = SimpleNamespace(
            finish_reason="STOP",
            content=SimpleNamespace(parts=[SimpleNamespace(text='{"title": "x"}')]),
        )
        usage = SimpleNamespace(prompt_token_count=20, candidates_token_count=5, thoughts_token_count=10)
        mock_client = mocker.patch("ugh.llm.google_provider.genai.Client")
        mock_client.return_value.models.generate_content.return_value = SimpleNamespace(
            candidates=[candidate], usage_metadata=usage
        )

        result = GoogleProvider().generate_raw("system", "user")

        assert result.raw_response == '{"title": "x"}'
        assert result.input_tokens == 20
        assert result.output_tokens == 15

    def test_transport_error(self, mocker):
        """Test mapping of network failures."""
        mock_client = mocker.patch("ugh.llm.google_provider.genai.Client")
        mock_client.return_value.models.generate_content.side_effect = httpx.ConnectError("refused")

        with pytest.raises(LLMTransportError):
            GoogleProvider().generate_raw("system", "user")

    def test_thinking_model_budget(self, mocker):
        """Test the larger output budget for thinking models."""
        mock_client = mocker.patch("ugh.llm.google_provider.genai.Client")
        mock_generate = mock_client.return_value.models.generate_content
        mock_generate.return_value = SimpleNamespace(candidates=[], usage_metadata=None)

        with pytest.raises(LLMResponseError):
            GoogleProvider(model="gemini-2.5-flash", max_tokens=100).generate_raw("system", "user")

        assert mock_generate.call_args.kwargs["config"].max_output_tokens == 300

    def test_client_construction_error(self, mocker):
        """Test that a failure building the client is mapped to LLMError."""
        mocker.patch("ugh.llm.google_provider.genai.Client", side_effect=ValueError("bad http options"))

        with pytest.raises(LLMError, match="bad http options"):
            GoogleProvider().generate_raw("system", "user")


class TestCohereAndGroqProviders:
    """Tests for the Cohere and Groq providers."""

    def test_cohere_success(self, mocker, monkeypatch):
        """Test Cohere text extraction."""
        monkeypatch.setenv("COHERE_API_KEY", "cohere-key")
        mock_client = mocker.patch("ugh.llm.cohere_provider.cohere.ClientV2")
        mock_client.return_value.chat.return_value = SimpleNamespace(
            message=SimpleNamespace(content=[SimpleNamespace(text='{"title": "x"}')]),
            usage=SimpleNamespace(tokens=SimpleNamespace(input_tokens=8.0, output_tokens=2.0)),
        )

        result = CohereProvider().generate_raw("system", "user")

        assert result.raw_response == '{"title": "x"}'
        assert result.input_tokens == 8
        assert result.output_tokens == 2

    def test_groq_empty_response(self, mocker, monkeypatch):
        """Test that Groq answers without choices raise LLMResponseError."""
        monkeypatch.setenv("GROQ_API_KEY", "groq-key")
        mock_client = mocker.patch("ugh.llm.groq_provider.Groq")
        mock_client.return_value.chat.completions.create.return_value = SimpleNamespace(
            choices=[], usage=None
        )

        with pytest.raises(LLMResponseError):
            GroqProvider().generate_raw("system", "user")

    def test_cohere_client_construction_error(self, mocker, monkeypatch):
        """Test that a failure building the Cohere client is mapped to LLMError."""
        monkeypatch.setenv("COHERE_API_KEY", "cohere-key")
        mocker.patch("ugh.llm.cohere_provider.cohere.ClientV2", side_effect=ValueError("bad timeout"))

        with pytest.raises(LLMError, match="Cohere API call failed"):
            CohereProvider().generate_raw("system", "user")


class TestClientConstruction:
    """Tests for client construction failures in the remaining providers."""

    @pytest.mark.parametrize("provider_cls,env_var,target", [
        (AnthropicProvider, "ANTHROPIC_API_KEY", "ugh.llm.anthropic_provider.Anthropic"),
        (OpenAIProvider, "OPENAI_API_KEY", "ugh.llm.openai_provider.OpenAI"),
        (GroqProvider, "GROQ_API_KEY", "ugh.llm.groq_provider.Groq"),
    ])
    def test_mapped_to_llm_error(self, mocker, monkeypatch, provider_cls, env_var, target):
        """Test that the SDK failing to build a client raises LLMError."""
        monkeypatch.setenv(env_var, "test-key")
        mocker.patch(target, side_effect=ValueError("invalid client settings"))

        with pytest.raises(LLMError, match="invalid client settings"):
            provider_cls().generate_raw("system", "user")
