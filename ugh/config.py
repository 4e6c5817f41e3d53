"""Configuration for ugh.

Every setting is resolved through one ordered contract (resolve_setting):
1. Environment variable
2. Persisted file (config.yaml, or credentials for secrets)
3. Hard-coded default

Use 'ugh config' commands to modify the persisted settings.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional

from ugh import global_config
from ugh.errors import ConfigurationError
from ugh.logging import get_logger

logger = get_logger("config")


class LLMProvider(Enum):
    """Supported LLM providers."""

    GOOGLE = "google"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    OPENROUTER = "openrouter"
    GROQ = "groq"
    COHERE = "cohere"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.GOOGLE
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.2
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_ISSUE_TYPE = "Task"
DEFAULT_BRANCH_STRATEGY = "categorized"
DEFAULT_BRANCH_PREFIX = "feature"

DEFAULT_MODELS = {
    LLMProvider.GOOGLE: "gemini-2.5-flash",
    LLMProvider.ANTHROPIC: "claude-3-5-haiku-latest",
    LLMProvider.OPENAI: "gpt-4o-mini",
    LLMProvider.OPENROUTER: "anthropic/claude-sonnet-4",
    LLMProvider.GROQ: "llama-3.3-70b-versatile",
    LLMProvider.COHERE: "command-r",
}


# ============================================================
# AVAILABLE MODELS PER PROVIDER
# ============================================================

AVAILABLE_MODELS = {
    LLMProvider.GOOGLE: [
        "gemini-2.5-flash",
        "gemini-2.5-pro",
        "gemini-2.5-flash-lite",
        "gemini-2.0-flash",
    ],
    LLMProvider.ANTHROPIC: [
        "claude-sonnet-4-20250514",
        "claude-3-5-sonnet-latest",
        "claude-3-5-haiku-latest",
    ],
    LLMProvider.OPENAI: [
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4o",
        "gpt-4o-mini",
    ],
    LLMProvider.OPENROUTER: [
        "anthropic/claude-sonnet-4",
        "openai/gpt-4o",
        "google/gemini-2.0-flash-exp",
        "meta-llama/llama-3.3-70b-instruct",
        "deepseek/deepseek-chat",
    ],
    LLMProvider.GROQ: [
        "llama-3.3-70b-versatile",
        "llama-3.1-8b-instant",
    ],
    LLMProvider.COHERE: [
        "command-r-plus",
        "command-r",
    ],
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
    LLMProvider.GROQ: "GROQ_API_KEY",
    LLMProvider.COHERE: "COHERE_API_KEY",
}

JIRA_TOKEN_VAR = "UGH_JIRA_TOKEN"


# ============================================================
# SETTING RESOLUTION
# ============================================================


@dataclass(frozen=True)
class Setting:
    """Where a setting comes from and how to read it."""

    name: str
    env_var: str
    default: Any = None
    secret: bool = False
    parse: Callable[[str], Any] = str


SETTINGS = {
    setting.name: setting
    for setting in (
        Setting("jira_base_url", "UGH_JIRA_BASE_URL"),
        Setting("jira_email", "UGH_JIRA_EMAIL"),
        Setting("jira_token", JIRA_TOKEN_VAR, secret=True),
        Setting("default_board", "UGH_JIRA_DEFAULT_BOARD"),
        Setting("jira_issue_type", "UGH_JIRA_ISSUE_TYPE", DEFAULT_ISSUE_TYPE),
        Setting("llm_provider", "UGH_LLM_PROVIDER", DEFAULT_PROVIDER.value),
        Setting("llm_model", "UGH_LLM_MODEL"),
        Setting("max_tokens", "UGH_MAX_TOKENS", DEFAULT_MAX_TOKENS, parse=int),
        Setting("temperature", "UGH_TEMPERATURE", DEFAULT_TEMPERATURE, parse=float),
        Setting("request_timeout", "UGH_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, parse=float),
        Setting("branch_strategy", "UGH_BRANCH_STRATEGY", DEFAULT_BRANCH_STRATEGY),
        Setting("branch_prefix", "UGH_BRANCH_PREFIX", DEFAULT_BRANCH_PREFIX),
    )
}


def _clean(value: Any) -> Any:
    # Blank strings count as unset at every layer
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def resolve_setting(
    name: str,
    stored: Optional[dict] = None,
    credentials: Optional[dict] = None,
) -> Any:
    """Resolve one setting: environment, then persisted file, then default.

    Args:
        name: Setting name (a key of SETTINGS).
        stored: Parsed config.yaml. Loaded from disk if not given.
        credentials: Parsed credentials file. Loaded from disk if not given.

    Returns:
        The resolved value, or the setting's default.

    Raises:
        ConfigurationError: If a value cannot be parsed or a file is corrupt.
    """
    setting = SETTINGS[name]

    value = _clean(os.environ.get(setting.env_var))
    source = setting.env_var

    if value is None:
        if setting.secret:
            if credentials is None:
                credentials = global_config.load_credentials()
            value = _clean(credentials.get(setting.env_var))
        else:
            if stored is None:
                stored = global_config.load_global_config()
            value = _clean(stored.get(name))
        source = "stored config"

    if value is None:
        return setting.default

    try:
        return setting.parse(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"invalid value for {name} (from {source}): {value!r}")


def parse_provider(value: Optional[str]) -> Optional[LLMProvider]:
    """Parse a provider name case-insensitively, returning None if unknown."""
    if not value:
        return None
    try:
        return LLMProvider(value.strip().lower())
    except ValueError:
        return None


@dataclass(frozen=True)
class AppConfig:
    """Effective configuration for one run."""

    jira_base_url: Optional[str]
    jira_email: Optional[str]
    jira_token: Optional[str]
    default_board: Optional[str]
    jira_issue_type: str
    llm_provider: LLMProvider
    llm_model: str
    max_tokens: int
    temperature: float
    request_timeout: float
    branch_strategy: str
    branch_prefix: str
    workspace_root: Path

    @classmethod
    def load(cls, workspace_root: Path) -> "AppConfig":
        """Load the effective configuration.

        Args:
            workspace_root: Working tree the run operates on.

        Returns:
            An AppConfig with every field resolved.

        Raises:
            ConfigurationError: If a persisted file is corrupt or a value is invalid.
        """
        stored = global_config.load_global_config()
        credentials = global_config.load_credentials()

        def resolve(name: str) -> Any:
            return resolve_setting(name, stored=stored, credentials=credentials)

        provider_name = resolve("llm_provider")
        provider = parse_provider(provider_name)
        if provider is None:
            logger.warning(
                "LLM provider '%s' is not supported, using %s instead.",
                provider_name,
                DEFAULT_PROVIDER.value,
            )
            provider = DEFAULT_PROVIDER

        return cls(
            jira_base_url=resolve("jira_base_url"),
            jira_email=resolve("jira_email"),
            jira_token=resolve("jira_token"),
            default_board=resolve("default_board"),
            jira_issue_type=resolve("jira_issue_type"),
            llm_provider=provider,
            llm_model=resolve("llm_model") or DEFAULT_MODELS[provider],
            max_tokens=resolve("max_tokens"),
            temperature=resolve("temperature"),
            request_timeout=resolve("request_timeout"),
            branch_strategy=resolve("branch_strategy"),
            branch_prefix=resolve("branch_prefix"),
            workspace_root=workspace_root,
        )

    @property
    def api_key_env_var(self) -> str:
        return API_KEY_ENV_VARS[self.llm_provider]


def get_llm_api_key(provider: LLMProvider) -> Optional[str]:
    """Look up the API key for a provider (environment, then credentials file)."""
    env_var = API_KEY_ENV_VARS[provider]
    return _clean(os.environ.get(env_var)) or global_config.get_credential(env_var)


def missing_required_settings(config: AppConfig, board_override: Optional[str] = None) -> list[str]:
    """List the human-readable names of required settings that are not set.

    Args:
        config: The effective configuration.
        board_override: Board passed on the command line, if any.

    Returns:
        Names of missing settings; empty when the configuration is complete.
    """
    missing = []
    if not config.jira_base_url:
        missing.append("Jira base URL")
    if not config.jira_email:
        missing.append("Jira email")
    if not config.jira_token:
        missing.append("Jira API token")
    if not (board_override or "").strip() and not config.default_board:
        missing.append("default Jira board")
    if not get_llm_api_key(config.llm_provider):
        missing.append(f"{config.llm_provider.value} API key")
    return missing
