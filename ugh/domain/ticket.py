"""Ticket draft and created ticket types."""

from dataclasses import dataclass
from typing import Optional

from ugh.domain.branch import BranchCategory


@dataclass
class TicketDraft:
    """Proposed ticket content, before the tracker assigns a key.

    branch_summary is an independent pre-slugified field supplied by the
    generator; it is never re-derived from title. Non-emptiness of the text
    fields is checked where a draft enters the workflow, not here.
    """

    title: str
    description: str
    branch_category: BranchCategory
    branch_summary: str


@dataclass(frozen=True)
class Ticket:
    """A ticket created by the issue tracker."""

    key: str
    url: Optional[str] = None
