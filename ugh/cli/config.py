"""CLI commands for global configuration management."""

from typing import Optional

import typer

from ugh import global_config
from ugh.config import (
    API_KEY_ENV_VARS,
    AVAILABLE_MODELS,
    DEFAULT_MODELS,
    JIRA_TOKEN_VAR,
    LLMProvider,
    get_llm_api_key,
    parse_provider,
)
from ugh.cli.init import run_setup_wizard
from ugh.cli.utils import display_value, mask_secret
from ugh.errors import UghError

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage ugh configuration",
    add_completion=False,
)

VALID_PROVIDERS = ", ".join(p.value for p in LLMProvider)


def _parse_provider_or_exit(provider: str) -> LLMProvider:
    llm_provider = parse_provider(provider)
    if llm_provider is None:
        typer.echo(f"Invalid provider: {provider}", err=True)
        typer.echo(f"Valid providers: {VALID_PROVIDERS}")
        raise typer.Exit(1)
    return llm_provider


@config_app.command("init")
def config_init() -> None:
    """Run the interactive configuration wizard."""
    try:
        run_setup_wizard()
    except UghError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show the stored configuration (secrets masked)."""
    if not global_config.is_configured():
        typer.echo("No configuration found. Run 'ugh config init' to set up ugh.")

    try:
        config = global_config.load_global_config()
        credentials = global_config.load_credentials()

        typer.echo(f"Configuration file: {global_config.get_config_file_path()}")
        typer.echo(f"Jira base URL: {display_value(config.get('jira_base_url'))}")
        typer.echo(f"Jira email: {display_value(config.get('jira_email'))}")
        typer.echo(f"Jira API token: {mask_secret(credentials.get(JIRA_TOKEN_VAR))}")
        typer.echo(f"Default board: {display_value(config.get('default_board'))}")
        typer.echo(f"Default issue type: {display_value(config.get('jira_issue_type'))}")
        typer.echo(f"LLM provider: {display_value(config.get('llm_provider'))}")
        typer.echo(f"LLM model: {display_value(config.get('llm_model'))}")
        typer.echo(f"Branch strategy: {display_value(config.get('branch_strategy'))}")

        provider = parse_provider(config.get("llm_provider"))
        if provider:
            env_var = API_KEY_ENV_VARS[provider]
            typer.echo(f"API key ({env_var}): {mask_secret(credentials.get(env_var))}")

    except UghError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(
        ...,
        help=f"Provider name ({VALID_PROVIDERS}) or 'jira' for the Jira API token"
    )
) -> None:
    """Set or update an API key for a provider, or the Jira API token."""
    if provider.lower() == "jira":
        key_name, label = JIRA_TOKEN_VAR, "Jira API token"
    else:
        llm_provider = _parse_provider_or_exit(provider)
        key_name, label = API_KEY_ENV_VARS[llm_provider], f"{llm_provider.value} API key"

    api_key = typer.prompt(f"Enter your {label}", hide_input=True)

    try:
        global_config.save_credential(key_name, api_key.strip())
    except UghError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {label} saved")


def _choose_model(llm_provider: LLMProvider) -> str:
    """Ask for one of the known models, numbered from 1."""
    models = AVAILABLE_MODELS[llm_provider]
    default_index = models.index(DEFAULT_MODELS[llm_provider]) + 1

    for index, name in enumerate(models, 1):
        marker = " (default)" if index == default_index else ""
        typer.echo(f"  {index}. {name}{marker}")

    choice = typer.prompt("Model number", type=int, default=default_index)
    if not 1 <= choice <= len(models):
        typer.echo(f"No model numbered {choice}.", err=True)
        raise typer.Exit(1)
    return models[choice - 1]


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help=f"Provider name ({VALID_PROVIDERS})"),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name; omit to pick from the known models",
    ),
) -> None:
    """Choose the LLM provider and model used to draft tickets."""
    llm_provider = _parse_provider_or_exit(provider)

    if model is None:
        model = _choose_model(llm_provider)
    elif model not in AVAILABLE_MODELS[llm_provider]:
        typer.echo(f"{model} is not a known {llm_provider.value} model.")
        if not typer.confirm("Use it anyway?", default=False):
            raise typer.Exit(0)

    try:
        global_config.set_provider_and_model(llm_provider.value, model)
    except UghError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Drafting with {llm_provider.value} / {model}")
    if not get_llm_api_key(llm_provider):
        typer.echo(f"No {API_KEY_ENV_VARS[llm_provider]} found. Run 'ugh config set-key {llm_provider.value}'.")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List supported providers and whether an API key is available."""
    for llm_provider in LLMProvider:
        status = "key set" if get_llm_api_key(llm_provider) else "no key"
        typer.echo(f"{llm_provider.value:<12} {DEFAULT_MODELS[llm_provider]:<28} {status}")


@config_app.command("list-models")
def config_list_models(
    provider: Optional[str] = typer.Argument(None, help="Provider name; omit to list every provider"),
) -> None:
    """List known models, marking each provider's default."""
    providers = [_parse_provider_or_exit(provider)] if provider else list(LLMProvider)

    for llm_provider in providers:
        typer.echo(f"{llm_provider.value}:")
        for name in AVAILABLE_MODELS[llm_provider]:
            marker = " (default)" if name == DEFAULT_MODELS[llm_provider] else ""
            typer.echo(f"  {name}{marker}")
