"""Git command runner.

Contains:
- run_git_command: Run a git command and return its output
"""

import subprocess
from pathlib import Path
from typing import Optional

from ugh.git.exceptions import GitError


def run_git_command(args: list[str], cwd: Optional[Path] = None, strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run the command in. Defaults to the process cwd.
        strip: Whether to strip surrounding whitespace from the output.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
        return result.stdout.strip() if strip else result.stdout
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
