"""JSON parsing and validation utilities for LLM responses.

Model output is untrusted. Contains:
- extract_json_text: Strip code fences and isolate the outermost JSON object
- parse_json_response: Parse raw LLM response as JSON
- validate_draft_json: Validate parsed JSON and convert it to a TicketDraft
"""

import json

from pydantic import BaseModel, ConfigDict, ValidationError

from ugh.domain import BranchCategory, TicketDraft, slugify
from ugh.llm.exceptions import DraftValidationError, JSONParseError

# Maximum number of words kept from a model-supplied branch summary
MAX_SUMMARY_WORDS = 6


class DraftJSON(BaseModel):
    """Exact JSON shape requested from the model."""

    model_config = ConfigDict(extra="forbid")

    title: str
    description: str
    branch_category: str
    branch_summary: str


def extract_json_text(raw_response: str) -> str:
    """Isolate the JSON candidate inside a raw model response.

    Args:
        raw_response: The raw text response from the LLM.

    Returns:
        The text between the first "{" and the last "}", with any
        surrounding code fence removed.
    """
    # Clean up the response - remove any markdown fences if present
    cleaned = raw_response.strip()

    # Remove markdown code fences if the model included them despite instructions
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        # Remove first line (```json or ```)
        lines = lines[1:]
        # Remove last line if it's ```
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    # Try to extract JSON object if there's extra content
    # Find the first { and last }
    first_brace = cleaned.find("{")
    last_brace = cleaned.rfind("}")

    if first_brace != -1 and last_brace != -1 and last_brace > first_brace:
        cleaned = cleaned[first_brace:last_brace + 1]

    return cleaned


def parse_json_response(raw_response: str) -> dict:
    """Parse the LLM response as a JSON object.

    Args:
        raw_response: The raw text response from the LLM.

    Returns:
        The parsed JSON as a dictionary.

    Raises:
        JSONParseError: If parsing fails or the JSON is not an object.
    """
    cleaned = extract_json_text(raw_response)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise JSONParseError(
            f"Failed to parse LLM response as JSON.\n"
            f"Error: {e}\n"
            f"Raw response:\n{raw_response}"
        )
    except RecursionError:
        raise JSONParseError("LLM response is nested too deeply to parse")

    if not isinstance(parsed, dict):
        raise JSONParseError(f"LLM response is not a JSON object: {raw_response}")
    return parsed


def normalize_branch_summary(value: str) -> str:
    """Slugify a model-supplied branch summary and keep at most six words.

    Returns:
        The normalized slug, or "" if the value has no letters or digits.
    """
    if not any(ch.isascii() and ch.isalnum() for ch in value):
        return ""
    words = slugify(value).split("-")
    return "-".join(words[:MAX_SUMMARY_WORDS])


def validate_draft_json(parsed: dict, fallback_summary: str) -> TicketDraft:
    """Validate parsed JSON and convert it to a TicketDraft.

    Args:
        parsed: The parsed JSON dictionary.
        fallback_summary: Slug used when the model left branch_summary empty.

    Returns:
        A validated TicketDraft with trimmed fields.

    Raises:
        JSONParseError: If the JSON does not have exactly the expected keys and types.
        DraftValidationError: If the category is unknown or title/description are empty.
    """
    try:
        payload = DraftJSON.model_validate(parsed)
    except ValidationError as e:
        raise JSONParseError(
            f"LLM response does not match expected schema.\n"
            f"Error: {e}\n"
            f"Parsed JSON: {parsed}"
        )

    category = BranchCategory.parse(payload.branch_category)
    if category is None:
        raise DraftValidationError(f"unknown branch_category: {payload.branch_category!r}")

    title = payload.title.strip()
    if not title:
        raise DraftValidationError("LLM returned an empty title")

    description = payload.description.strip()
    if not description:
        raise DraftValidationError("LLM returned an empty description")

    # An empty slug keeps the rest of the answer
    branch_summary = normalize_branch_summary(payload.branch_summary.strip()) or fallback_summary

    return TicketDraft(
        title=title,
        description=description,
        branch_category=category,
        branch_summary=branch_summary,
    )
