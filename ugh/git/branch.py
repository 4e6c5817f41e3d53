"""Git branch utilities.

Contains:
- branch_exists: Check whether a local branch exists
- checkout_branch: Switch to a branch, creating it if needed
"""

import subprocess
from pathlib import Path
from typing import Optional

from ugh.git.exceptions import GitError
from ugh.git.runner import run_git_command


def branch_exists(name: str, cwd: Optional[Path] = None) -> bool:
    """Check whether a local branch exists.

    Args:
        name: Branch name.
        cwd: Repository directory.

    Returns:
        True if refs/heads/<name> resolves.
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", f"refs/heads/{name}"],
            capture_output=True,
            text=True,
            cwd=cwd,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    return result.returncode == 0


def checkout_branch(name: str, cwd: Optional[Path] = None) -> None:
    """Switch to a branch, creating it from HEAD if it does not exist.

    Uncommitted changes are carried over to the branch.

    Args:
        name: Branch name.
        cwd: Repository directory.

    Raises:
        GitError: If the name is empty or git refuses the checkout.
    """
    if not name.strip():
        raise GitError("branch name cannot be empty")

    if branch_exists(name, cwd=cwd):
        run_git_command(["checkout", name], cwd=cwd)
    else:
        run_git_command(["checkout", "-b", name], cwd=cwd)
