"""Git status utilities.

Contains:
- get_status: Get git status output in porcelain format, untracked files included
- parse_status: Group porcelain lines by change kind
- format_change_summary: Render grouped changes as a short summary
"""

from pathlib import Path
from typing import Optional

from ugh.git.runner import run_git_command


def get_status(cwd: Optional[Path] = None) -> str:
    """Get git status output in porcelain format, including every untracked file.

    Returns:
        The git status output.
    """
    # Leading spaces are significant in porcelain output
    return run_git_command(
        ["status", "--porcelain=v1", "--untracked-files=all"],
        cwd=cwd,
        strip=False,
    )


def parse_status(status: str) -> dict[str, list[str]]:
    """Group porcelain status lines by change kind.

    Both the index and the worktree column count, so staged, unstaged and
    untracked changes are all reported.

    Args:
        status: Git status in porcelain format.

    Returns:
        Dictionary with "added", "modified", "deleted" and "renamed" path lists.
    """
    changes = {"added": [], "modified": [], "deleted": [], "renamed": []}

    for line in status.split("\n"):
        if len(line) < 4 or line.startswith("##"):
            continue

        codes = line[:2]
        filename = line[3:]

        # Handle renames: "R  old -> new"
        if " -> " in filename:
            old_name, new_name = filename.split(" -> ", 1)
            changes["renamed"].append(f"{old_name} to {new_name}")
        elif codes == "??" or "A" in codes:
            changes["added"].append(filename)
        elif "D" in codes:
            changes["deleted"].append(filename)
        else:
            changes["modified"].append(filename)

    return changes


def format_change_summary(changes: dict[str, list[str]]) -> str:
    """Render grouped changes as one line per change kind.

    Args:
        changes: Output of parse_status.

    Returns:
        Summary such as "Update src/app.py\\nAdd tests/test_app.py", or "" when empty.
    """
    lines = []
    if changes["modified"]:
        lines.append("Update " + ", ".join(changes["modified"]))
    if changes["added"]:
        lines.append("Add " + ", ".join(changes["added"]))
    if changes["deleted"]:
        lines.append("Remove " + ", ".join(changes["deleted"]))
    if changes["renamed"]:
        lines.append("Rename " + ", ".join(changes["renamed"]))
    return "\n".join(lines)
