"""Ticket workflow: changes, draft, ticket, branch.

Linear sequence with explicit abort points:
1. Resolve the board (override, else configured default)
2. Summarize local changes
3. Compute the cache key and load the cache (best effort)
4. Use the cached draft or generate one and cache it (best effort)
5. Reject an empty description
6. Create the ticket
7. Reject an empty branch summary
8. Derive the branch name
9. Check out the branch
"""

from dataclasses import dataclass
from typing import Callable, Optional

from ugh.cache import TicketDraftCache, compute_key
from ugh.context import AppContext
from ugh.domain import BranchName, ChangeSummary, Ticket, TicketDraft
from ugh.errors import ConfigurationError, LanguageModelError, UghError
from ugh.logging import get_logger

logger = get_logger("workflow")


@dataclass(frozen=True)
class TicketWorkflowOutcome:
    """Result of a successful run."""

    ticket: Ticket
    branch: BranchName


def resolve_board(ctx: AppContext, board_override: Optional[str]) -> str:
    """Return the explicit board, else the configured default.

    Raises:
        ConfigurationError: If neither is set.
    """
    board = (board_override or "").strip() or (ctx.config.default_board or "").strip()
    if not board:
        raise ConfigurationError("no board configured")
    return board


def _load_cache(cache_loader: Callable[[], TicketDraftCache]) -> Optional[TicketDraftCache]:
    try:
        return cache_loader()
    except UghError as e:
        logger.warning("Could not load ticket draft cache (%s). Continuing without cache.", e)
        return None


def _resolve_draft(
    ctx: AppContext,
    cache: Optional[TicketDraftCache],
    cache_key: str,
    changes: ChangeSummary,
) -> TicketDraft:
    if cache is not None:
        cached = cache.get(cache_key)
        if cached is not None:
            logger.debug("Using cached ticket draft %s", cache_key[:12])
            return cached

    draft = ctx.language_model.draft_ticket(changes)

    if cache is not None:
        cache.insert(cache_key, draft)
        try:
            cache.save()
        except UghError as e:
            logger.warning("Failed to persist ticket draft cache (%s).", e)

    return draft


def create_ticket_from_changes(
    ctx: AppContext,
    board_override: Optional[str] = None,
    cache_loader: Callable[[], TicketDraftCache] = TicketDraftCache.load,
) -> TicketWorkflowOutcome:
    """Draft a ticket from local changes, create it and check out its branch.

    Args:
        ctx: Configuration and services.
        board_override: Board key that takes precedence over the configured default.
        cache_loader: Returns the draft cache; failures degrade to no caching.

    Returns:
        The created ticket and the checked-out branch.

    Raises:
        ConfigurationError: If no board is available.
        LanguageModelError: If the draft has an empty description or branch summary.
        VersionControlError: If reading changes or checking out fails.
        IssueTrackerError: If the ticket cannot be created.
    """
    board = resolve_board(ctx, board_override)

    changes = ctx.version_control.summarize_changes()

    cache_key = compute_key(changes.summary, changes.files_changed, board)
    cache = _load_cache(cache_loader)

    draft = _resolve_draft(ctx, cache, cache_key, changes)

    # Guards the cached path too
    if not draft.description.strip():
        raise LanguageModelError("language model returned an empty description")

    ticket = ctx.issue_tracker.create_ticket(board, draft)

    branch_summary = draft.branch_summary.strip()
    if not branch_summary:
        raise LanguageModelError("language model returned an empty branch summary")

    branch = ctx.branching.build(draft.branch_category, ticket.key, branch_summary)

    ctx.version_control.checkout_branch(branch)

    return TicketWorkflowOutcome(ticket=ticket, branch=branch)
