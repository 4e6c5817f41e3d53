"""Workflows for ugh."""

from ugh.workflow.ticket import (
    TicketWorkflowOutcome,
    create_ticket_from_changes,
    resolve_board,
)


__all__ = [
    "TicketWorkflowOutcome",
    "create_ticket_from_changes",
    "resolve_board",
]
