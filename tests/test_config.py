"""Tests for ugh.config and ugh.global_config modules."""

import os
import stat

import pytest

from ugh import global_config
from ugh.config import (
    DEFAULT_MODELS,
    AppConfig,
    LLMProvider,
    get_llm_api_key,
    missing_required_settings,
    parse_provider,
    resolve_setting,
)
from ugh.errors import ConfigurationError


class TestGlobalConfigDir:
    """Tests for get_global_config_dir function."""

    def test_env_override(self, config_dir):
        """Test that UGH_CONFIG_DIR wins."""
        assert global_config.get_global_config_dir() == config_dir

    def test_xdg_config_home(self, monkeypatch, temp_dir):
        """Test XDG_CONFIG_HOME when no override is set."""
        monkeypatch.delenv("UGH_CONFIG_DIR")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "xdg"))

        assert global_config.get_global_config_dir() == temp_dir / "xdg" / "ugh"


class TestGlobalConfigFiles:
    """Tests for config.yaml and credentials handling."""

    def test_missing_config_is_empty(self):
        """Test that no file means no settings."""
        assert global_config.load_global_config() == {}
        assert global_config.load_credentials() == {}
        assert not global_config.is_configured()

    def test_config_round_trip(self):
        """Test saving and loading config.yaml."""
        global_config.save_global_config({"jira_email": "dev@example.com", "max_tokens": 512})

        assert global_config.is_configured()
        assert global_config.load_global_config() == {"jira_email": "dev@example.com", "max_tokens": 512}

    def test_corrupt_yaml(self, config_dir):
        """Test that invalid YAML is a configuration error."""
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("jira_email: [unclosed")

        with pytest.raises(ConfigurationError, match="invalid config file"):
            global_config.load_global_config()

    def test_non_mapping_yaml(self, config_dir):
        """Test that a YAML list is rejected."""
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="expected a mapping"):
            global_config.load_global_config()

    def test_save_and_remove_credential(self):
        """Test credential updates."""
        global_config.save_credential("UGH_JIRA_TOKEN", "token-1")
        global_config.save_credential("GOOGLE_API_KEY", "key-1")
        assert global_config.get_credential("UGH_JIRA_TOKEN") == "token-1"

        global_config.save_credential("UGH_JIRA_TOKEN", None)

        assert global_config.get_credential("UGH_JIRA_TOKEN") is None
        assert global_config.get_credential("GOOGLE_API_KEY") == "key-1"

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_credentials_are_private(self):
        """Test owner-only file permissions."""
        global_config.save_credential("UGH_JIRA_TOKEN", "secret")

        mode = stat.S_IMODE(global_config.get_credentials_file_path().stat().st_mode)
        assert mode == 0o600

    def test_set_provider_and_model(self):
        """Test that provider and model are written together."""
        global_config.set_provider_and_model("openai", "gpt-4o")

        config = global_config.load_global_config()
        assert config["llm_provider"] == "openai"
        assert config["llm_model"] == "gpt-4o"


class TestResolveSetting:
    """Tests for resolve_setting function."""

    def test_default(self):
        """Test that the default applies when nothing is set."""
        assert resolve_setting("jira_issue_type", stored={}, credentials={}) == "Task"
        assert resolve_setting("jira_email", stored={}, credentials={}) is None

    def test_file_over_default(self):
        """Test that stored values beat defaults."""
        assert resolve_setting("jira_issue_type", stored={"jira_issue_type": "Bug"}) == "Bug"

    def test_env_over_file(self, monkeypatch):
        """Test that environment variables beat stored values."""
        monkeypatch.setenv("UGH_JIRA_ISSUE_TYPE", "Story")

        assert resolve_setting("jira_issue_type", stored={"jira_issue_type": "Bug"}) == "Story"

    def test_blank_env_is_ignored(self, monkeypatch):
        """Test that whitespace-only env values count as unset."""
        monkeypatch.setenv("UGH_JIRA_ISSUE_TYPE", "   ")

        assert resolve_setting("jira_issue_type", stored={"jira_issue_type": "Bug"}) == "Bug"

    def test_secret_from_credentials(self):
        """Test that secrets are read from the credentials file."""
        global_config.save_credential("UGH_JIRA_TOKEN", "stored-token")

        assert resolve_setting("jira_token") == "stored-token"

    def test_parses_numbers(self, monkeypatch):
        """Test typed settings."""
        monkeypatch.setenv("UGH_MAX_TOKENS", "2048")

        assert resolve_setting("max_tokens", stored={}) == 2048
        assert resolve_setting("temperature", stored={"temperature": 0.7}) == 0.7

    def test_invalid_number(self, monkeypatch):
        """Test that unparseable values are configuration errors."""
        monkeypatch.setenv("UGH_REQUEST_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="request_timeout"):
            resolve_setting("request_timeout", stored={})


class TestAppConfigLoad:
    """Tests for AppConfig.load."""

    def test_defaults(self, temp_dir):
        """Test the configuration of a fresh install."""
        config = AppConfig.load(temp_dir)

        assert config.jira_base_url is None
        assert config.default_board is None
        assert config.jira_issue_type == "Task"
        assert config.llm_provider == LLMProvider.GOOGLE
        assert config.llm_model == DEFAULT_MODELS[LLMProvider.GOOGLE]
        assert config.max_tokens == 1024
        assert config.temperature == 0.2
        assert config.request_timeout == 30.0
        assert config.branch_strategy == "categorized"
        assert config.workspace_root == temp_dir

    def test_stored_and_env_values(self, monkeypatch, temp_dir):
        """Test that every layer contributes."""
        global_config.save_global_config({
            "jira_base_url": "https://jira.example.com",
            "llm_provider": "anthropic",
            "default_board": "TCK",
        })
        monkeypatch.setenv("UGH_JIRA_DEFAULT_BOARD", "OPS")

        config = AppConfig.load(temp_dir)

        assert config.jira_base_url == "https://jira.example.com"
        assert config.default_board == "OPS"
        assert config.llm_provider == LLMProvider.ANTHROPIC
        assert config.llm_model == DEFAULT_MODELS[LLMProvider.ANTHROPIC]
        assert config.api_key_env_var == "ANTHROPIC_API_KEY"

    def test_unknown_provider_falls_back(self, monkeypatch, temp_dir):
        """Test that an unsupported provider is replaced by the default."""
        monkeypatch.setenv("UGH_LLM_PROVIDER", "mistral")

        assert AppConfig.load(temp_dir).llm_provider == LLMProvider.GOOGLE

    def test_parse_provider(self):
        """Test provider name parsing."""
        assert parse_provider(" OpenAI ") == LLMProvider.OPENAI
        assert parse_provider("unknown") is None
        assert parse_provider(None) is None


class TestMissingRequiredSettings:
    """Tests for missing_required_settings function."""

    def test_everything_missing(self, temp_dir):
        """Test a fresh install."""
        config = AppConfig.load(temp_dir)

        assert missing_required_settings(config) == [
            "Jira base URL",
            "Jira email",
            "Jira API token",
            "default Jira board",
            "google API key",
        ]

    def test_complete(self, monkeypatch, app_config):
        """Test a complete configuration."""
        monkeypatch.setenv("GOOGLE_API_KEY", "key")

        assert missing_required_settings(app_config) == []

    def test_board_override_satisfies_board(self, make_config):
        """Test that a command-line board replaces the default."""
        global_config.save_credential("GOOGLE_API_KEY", "key")
        config = make_config(default_board=None)

        assert missing_required_settings(config) == ["default Jira board"]
        assert missing_required_settings(config, "OPS") == []

    def test_get_llm_api_key(self, monkeypatch):
        """Test env then credentials lookup."""
        assert get_llm_api_key(LLMProvider.GROQ) is None

        global_config.save_credential("GROQ_API_KEY", "stored")
        assert get_llm_api_key(LLMProvider.GROQ) == "stored"

        monkeypatch.setenv("GROQ_API_KEY", "from-env")
        assert get_llm_api_key(LLMProvider.GROQ) == "from-env"
