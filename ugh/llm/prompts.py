"""Prompt templates for ticket drafting."""

from ugh.domain import BranchCategory, ChangeSummary

# System prompt for the LLM (shared across all providers)
SYSTEM_PROMPT = """You are an expert software engineer writing issue-tracker tickets.
Be precise: only describe work actually shown in the change summary.
Respond with a single JSON object and nothing else."""

USER_PROMPT_TEMPLATE = """Given the following summary of uncommitted work, produce a JSON object with exactly these keys:
- "title": string (imperative mood, <=80 chars)
- "description": string (what the work changes and why, plain text)
- "branch_category": string (one of: feature, fix, quality)
- "branch_summary": string (<=6 words, lowercase, hyphen-separated, e.g. "add-login-throttling")

Rules:
- Output ONLY valid JSON. No markdown fences. No extra keys. No commentary.
- Choose "branch_category" based on the nature of the work:
  * feature: new capability
  * fix: bug or error correction
  * quality: refactoring, cleanup, docs, chores
- Only describe changes listed in the summary. Do not infer or assume other changes.

HINTS (from a local heuristic, override them if the summary says otherwise):
- suggested branch_category: {category_hint}
- suggested branch_summary: {summary_hint}

[FILES_CHANGED]
{files_changed}

[CHANGE_SUMMARY]
{summary}"""


def build_user_prompt(changes: ChangeSummary, category_hint: BranchCategory, summary_hint: str) -> str:
    """Build the user prompt from the change summary and heuristic hints.

    Args:
        changes: The local change summary.
        category_hint: Heuristic category.
        summary_hint: Heuristic branch slug.

    Returns:
        The formatted user prompt.
    """
    return USER_PROMPT_TEMPLATE.format(
        category_hint=category_hint.as_str(),
        summary_hint=summary_hint,
        files_changed=changes.files_changed,
        summary=changes.summary or "(no local changes)",
    )
