"""Domain types for ugh.

This package provides the value types passed between components:
- change: ChangeSummary
- ticket: TicketDraft, Ticket
- branch: BranchCategory, BranchName, slugify, branching strategies
"""

from ugh.domain.branch import (
    BRANCHING_STRATEGIES,
    SLUG_PLACEHOLDER,
    BranchCategory,
    BranchingStrategy,
    BranchName,
    CategorizedBranching,
    PrefixedBranching,
    RawBranching,
    get_branching_strategy,
    slugify,
)
from ugh.domain.change import ChangeSummary
from ugh.domain.ticket import Ticket, TicketDraft


__all__ = [
    "BRANCHING_STRATEGIES",
    "SLUG_PLACEHOLDER",
    "BranchCategory",
    "BranchingStrategy",
    "BranchName",
    "CategorizedBranching",
    "PrefixedBranching",
    "RawBranching",
    "get_branching_strategy",
    "slugify",
    "ChangeSummary",
    "Ticket",
    "TicketDraft",
]
