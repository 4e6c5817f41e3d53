"""Shared test fixtures and configuration."""

import dataclasses
import tempfile
from pathlib import Path

import pytest

from ugh.config import API_KEY_ENV_VARS, SETTINGS, AppConfig, LLMProvider
from ugh.domain import BranchCategory, TicketDraft
from ugh.global_config import CONFIG_DIR_ENV_VAR


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def config_dir(temp_dir, monkeypatch):
    """Point ugh at an empty config directory and clear ugh-related env vars."""
    directory = temp_dir / "ugh-config"
    monkeypatch.setenv(CONFIG_DIR_ENV_VAR, str(directory))
    for setting in SETTINGS.values():
        monkeypatch.delenv(setting.env_var, raising=False)
    for env_var in API_KEY_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    return directory


@pytest.fixture
def app_config(temp_dir):
    """A complete configuration for one run."""
    return AppConfig(
        jira_base_url="https://jira.example.com",
        jira_email="dev@example.com",
        jira_token="jira-token",
        default_board="TCK",
        jira_issue_type="Task",
        llm_provider=LLMProvider.GOOGLE,
        llm_model="gemini-2.5-flash",
        max_tokens=1024,
        temperature=0.2,
        request_timeout=30.0,
        branch_strategy="categorized",
        branch_prefix="feature",
        workspace_root=temp_dir,
    )


@pytest.fixture
def make_config(app_config):
    """Build a configuration with some fields overridden."""
    def _make(**overrides):
        return dataclasses.replace(app_config, **overrides)
    return _make


@pytest.fixture
def login_fix_draft():
    """Draft for a login bug fix."""
    return TicketDraft(
        title="Fix login bug",
        description="Users could not log in after a password reset.",
        branch_category=BranchCategory.FIX,
        branch_summary="fix-login-bug",
    )
