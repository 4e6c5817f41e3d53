"""Interactive setup for ugh configuration."""

import typer

from ugh import global_config
from ugh.config import API_KEY_ENV_VARS, DEFAULT_PROVIDER, JIRA_TOKEN_VAR, parse_provider
from ugh.cli.utils import apply_prompt
from ugh.domain import BRANCHING_STRATEGIES


def run_setup_wizard() -> None:
    """Prompt for every stored setting and save the answers.

    Non-secret settings go to config.yaml, secrets to the credentials file.
    """
    config = global_config.load_global_config()
    credentials = global_config.load_credentials()

    typer.echo("Configuring ugh CLI.")
    typer.echo("Press Enter to keep the current value, '-' to clear it.")
    typer.echo("Secrets are stored in the local credentials file; protect your filesystem accordingly.")
    typer.echo()

    apply_prompt(config, "jira_base_url", "Jira base URL (e.g., https://company.atlassian.net)")
    apply_prompt(config, "jira_email", "Jira email")
    apply_prompt(credentials, JIRA_TOKEN_VAR, "Jira API token", secret=True)
    apply_prompt(config, "default_board", "Default Jira board/project key")
    apply_prompt(config, "jira_issue_type", "Default Jira issue type")

    apply_prompt(config, "llm_provider", "LLM provider (google/anthropic/openai/openrouter/groq/cohere)")
    provider = parse_provider(config.get("llm_provider")) or DEFAULT_PROVIDER
    apply_prompt(credentials, API_KEY_ENV_VARS[provider], f"{provider.value} API key", secret=True)
    apply_prompt(config, "llm_model", f"{provider.value} model")

    apply_prompt(config, "branch_strategy", f"Branch strategy ({'/'.join(BRANCHING_STRATEGIES)})")
    if config.get("branch_strategy") == "prefixed":
        apply_prompt(config, "branch_prefix", "Branch prefix")

    global_config.save_global_config(config)
    for key in (JIRA_TOKEN_VAR, API_KEY_ENV_VARS[provider]):
        global_config.save_credential(key, credentials.get(key))

    typer.echo()
    typer.echo(f"Configuration saved to {global_config.get_global_config_dir()}")
