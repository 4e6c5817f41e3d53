"""Heuristic ticket drafting.

Pure functions of a ChangeSummary; always produce a usable draft:
- infer_category: Pick a branch category from keywords in the summary
- infer_branch_summary: Build a branch slug from the summary
- heuristic_draft: Build a complete TicketDraft
"""

from ugh.domain import BranchCategory, ChangeSummary, TicketDraft

# Keyword rules, checked in order; the first match wins
CATEGORY_KEYWORDS = [
    (BranchCategory.FIX, ("fix", "bug", "error")),
    (BranchCategory.QUALITY, ("refactor", "cleanup", "docs", "chore")),
]

TITLE_VERBS = {
    BranchCategory.FEATURE: "Add",
    BranchCategory.FIX: "Fix",
    BranchCategory.QUALITY: "Improve",
}

PENDING_SUMMARY = "pending-update"
MAX_SLUG_SOURCE_WORDS = 8
EMPTY_DESCRIPTION = "Summarize the local modifications before creating the ticket."


def infer_category(changes: ChangeSummary) -> BranchCategory:
    """Infer the branch category from substrings of the lowercased summary.

    Args:
        changes: The local change summary.

    Returns:
        FIX for fix/bug/error, QUALITY for refactor/cleanup/docs/chore,
        FEATURE otherwise.
    """
    lower = changes.summary.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return category
    return BranchCategory.FEATURE


def infer_branch_summary(changes: ChangeSummary) -> str:
    """Build a hyphenated slug from the first words of the summary.

    Args:
        changes: The local change summary.

    Returns:
        The slug. "pending-update" or "update-{n}-files" when the summary is
        empty, "pending-update" when no word survives cleaning.
    """
    summary = changes.summary.strip()
    if not summary:
        if changes.files_changed == 0:
            return PENDING_SUMMARY
        return f"update-{changes.files_changed}-files"

    words = []
    for word in summary.split()[:MAX_SLUG_SOURCE_WORDS]:
        cleaned = "".join(
            ch for ch in word
            if (ch.isascii() and ch.isalnum()) or ch == "-"
        ).lower()
        if cleaned:
            words.append(cleaned)

    return "-".join(words) if words else PENDING_SUMMARY


def heuristic_draft(changes: ChangeSummary) -> TicketDraft:
    """Build a complete draft without any network call.

    Args:
        changes: The local change summary.

    Returns:
        A TicketDraft whose four fields are non-empty.
    """
    if changes.summary:
        description = f"Summary of uncommitted work:\n{changes.summary}"
    else:
        description = EMPTY_DESCRIPTION

    branch_category = infer_category(changes)
    branch_summary = infer_branch_summary(changes)
    title = f"{TITLE_VERBS[branch_category]} {branch_summary.replace('-', ' ')}"

    return TicketDraft(
        title=title,
        description=description,
        branch_category=branch_category,
        branch_summary=branch_summary,
    )
