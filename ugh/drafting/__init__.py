"""Ticket drafting for ugh.

This package provides:
- heuristics: Deterministic drafting that always succeeds
- generator: DraftGenerator, the LLM path with heuristic fallback
"""

from ugh.drafting.generator import DraftGenerator
from ugh.drafting.heuristics import (
    heuristic_draft,
    infer_branch_summary,
    infer_category,
)


__all__ = [
    "DraftGenerator",
    "heuristic_draft",
    "infer_branch_summary",
    "infer_category",
]
