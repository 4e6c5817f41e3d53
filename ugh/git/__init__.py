"""Git integration for ugh.

This package provides:
- exceptions: GitError
- runner: run_git_command
- status: get_status, parse_status, format_change_summary
- branch: branch_exists, checkout_branch
- cli: GitCli, the VersionControlService implementation
"""

from ugh.git.exceptions import GitError
from ugh.git.runner import run_git_command
from ugh.git.status import format_change_summary, get_status, parse_status
from ugh.git.branch import branch_exists, checkout_branch
from ugh.git.cli import GitCli


__all__ = [
    "GitError",
    "run_git_command",
    "format_change_summary",
    "get_status",
    "parse_status",
    "branch_exists",
    "checkout_branch",
    "GitCli",
]
