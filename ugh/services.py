"""Capability interfaces consumed by the ticket workflow.

Any conforming implementation (subprocess-backed, HTTP client or an
in-memory test double) can be injected without changing the workflow.
"""

from abc import ABC, abstractmethod

from ugh.domain import BranchName, ChangeSummary, Ticket, TicketDraft


class VersionControlService(ABC):
    """Reads local changes and switches branches."""

    @abstractmethod
    def summarize_changes(self) -> ChangeSummary:
        """Summarize uncommitted changes.

        Returns:
            ChangeSummary(0, "") when there are no local changes.

        Raises:
            VersionControlError: If the repository cannot be read.
        """
        pass

    @abstractmethod
    def checkout_branch(self, branch: BranchName) -> None:
        """Create the branch, or switch to it if it already exists.

        Raises:
            VersionControlError: If the checkout fails.
        """
        pass


class IssueTrackerService(ABC):
    """Creates tickets on a board."""

    @abstractmethod
    def create_ticket(self, board: str, draft: TicketDraft) -> Ticket:
        """Create a ticket from a draft.

        Raises:
            IssueTrackerError: If the board is empty or the tracker rejects the request.
            LanguageModelError: If the draft title is empty.
        """
        pass


class LanguageModelService(ABC):
    """Drafts ticket content from a change summary."""

    @abstractmethod
    def draft_ticket(self, changes: ChangeSummary) -> TicketDraft:
        """Draft a ticket for the given changes."""
        pass
