"""Application context: configuration plus injected services."""

from dataclasses import dataclass, field

from ugh.config import AppConfig
from ugh.domain import BranchingStrategy, CategorizedBranching, get_branching_strategy
from ugh.drafting import DraftGenerator
from ugh.git import GitCli
from ugh.jira import JiraClient
from ugh.services import IssueTrackerService, LanguageModelService, VersionControlService


@dataclass
class AppContext:
    """Everything the ticket workflow needs for one run."""

    config: AppConfig
    version_control: VersionControlService
    issue_tracker: IssueTrackerService
    language_model: LanguageModelService
    branching: BranchingStrategy = field(default_factory=CategorizedBranching)

    @classmethod
    def from_config(cls, config: AppConfig) -> "AppContext":
        """Wire the git, Jira and LLM implementations for the given configuration."""
        return cls(
            config=config,
            version_control=GitCli(config.workspace_root),
            issue_tracker=JiraClient(
                config.jira_base_url,
                config.jira_email,
                config.jira_token,
                issue_type=config.jira_issue_type,
                timeout=config.request_timeout,
            ),
            language_model=DraftGenerator.from_config(config),
            branching=get_branching_strategy(config.branch_strategy, config.branch_prefix),
        )
