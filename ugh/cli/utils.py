"""Shared helpers for ugh CLI commands."""

from enum import Enum
from typing import Optional

import typer

NOT_SET = "<not set>"


class PromptAction(Enum):
    """Outcome of one setup prompt."""

    KEEP = "keep"
    CLEAR = "clear"
    SET = "set"


def display_value(value: Optional[object]) -> str:
    """Render a stored value, or <not set> when absent or blank."""
    if value is None or str(value).strip() == "":
        return NOT_SET
    return str(value)


def mask_secret(value: Optional[str]) -> str:
    """Mask a secret, keeping three characters on each side of long values."""
    if not value:
        return NOT_SET
    if len(value) > 6:
        return f"{value[:3]}***{value[-3:]}"
    return "***"


def prompt_setting(field: str, current: Optional[str], secret: bool = False) -> tuple[PromptAction, str]:
    """Prompt for one setting.

    Enter keeps the current value and "-" clears it.

    Args:
        field: Human-readable setting name.
        current: Current value, if any.
        secret: Hide input and the current value.

    Returns:
        The action and the entered text.
    """
    if current and secret:
        label = f"{field} [****] (Enter to keep, '-' to clear)"
    elif current:
        label = f"{field} [{current}] (Enter to keep, '-' to clear)"
    else:
        label = f"{field} (Enter to skip)"

    entered = typer.prompt(label, default="", show_default=False, hide_input=secret).strip()

    if not entered:
        return PromptAction.KEEP, ""
    if entered == "-":
        return PromptAction.CLEAR, ""
    return PromptAction.SET, entered


def apply_prompt(store: dict, key: str, field: str, secret: bool = False) -> None:
    """Prompt for a setting and apply the answer to a dictionary in place."""
    current = store.get(key)
    action, entered = prompt_setting(field, str(current) if current is not None else None, secret=secret)

    if action == PromptAction.CLEAR:
        store.pop(key, None)
    elif action == PromptAction.SET:
        store[key] = entered
