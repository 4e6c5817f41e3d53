"""Subprocess-backed version control service."""

from pathlib import Path

from ugh.domain import BranchName, ChangeSummary
from ugh.git.branch import checkout_branch
from ugh.git.status import format_change_summary, get_status, parse_status
from ugh.logging import get_logger
from ugh.services import VersionControlService

logger = get_logger("git")


class GitCli(VersionControlService):
    """Reads changes and switches branches with the git command line."""

    def __init__(self, workspace_root: Path):
        self.workspace_root = workspace_root

    def summarize_changes(self) -> ChangeSummary:
        """Summarize staged, unstaged and untracked changes.

        Raises:
            GitError: If git fails or the workspace is not a repository.
        """
        changes = parse_status(get_status(cwd=self.workspace_root))
        files_changed = sum(len(paths) for paths in changes.values())
        if files_changed == 0:
            return ChangeSummary.empty()

        logger.debug("Found %d changed files in %s", files_changed, self.workspace_root)
        return ChangeSummary(files_changed=files_changed, summary=format_change_summary(changes))

    def checkout_branch(self, branch: BranchName) -> None:
        """Create or switch to the branch.

        Raises:
            GitError: If the checkout fails.
        """
        checkout_branch(branch.as_str(), cwd=self.workspace_root)
