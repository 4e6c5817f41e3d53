"""Branch categories, branch names and slug generation.

Contains:
- BranchCategory: Closed set of branch categories
- BranchName: Immutable branch identifier
- slugify: Idempotent text-to-slug transform
- BranchingStrategy and its implementations: pluggable naming policies
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ugh.errors import ConfigurationError

# Substituted when a slug would otherwise be empty
SLUG_PLACEHOLDER = "summary"


class BranchCategory(Enum):
    """Category prefix of a branch name."""

    FEATURE = "feature"
    FIX = "fix"
    QUALITY = "quality"

    def as_str(self) -> str:
        """Return the canonical lowercase form."""
        return self.value

    @classmethod
    def parse(cls, value: str) -> Optional["BranchCategory"]:
        """Parse a category case-insensitively.

        Args:
            value: Text such as "Fix" or "quality".

        Returns:
            The matching category, or None if the text is not recognized.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


def slugify(text: str) -> str:
    """Convert text into a lowercase, hyphen-separated slug.

    ASCII letters and digits are lowercased; every other character becomes
    a hyphen. Leading and trailing hyphens are trimmed and runs of hyphens
    collapse to one. slugify(slugify(x)) == slugify(x).

    Args:
        text: Arbitrary text.

    Returns:
        The slug, or SLUG_PLACEHOLDER if nothing survives.
    """
    mapped = "".join(
        ch.lower() if ch.isascii() and ch.isalnum() else "-"
        for ch in text
    )

    result = []
    prev_dash = False
    for ch in mapped.strip("-"):
        if ch == "-":
            if not prev_dash:
                result.append(ch)
            prev_dash = True
        else:
            result.append(ch)
            prev_dash = False

    return "".join(result) or SLUG_PLACEHOLDER


@dataclass(frozen=True)
class BranchName:
    """A branch identifier, constructed once and never mutated."""

    value: str

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_parts(cls, category: BranchCategory, ticket_key: str, summary: str) -> "BranchName":
        """Build "{category}/{ticket_key}/{slug}".

        Args:
            category: Branch category.
            ticket_key: Tracker-assigned key; surrounding whitespace is trimmed.
            summary: Text to slugify for the last segment.

        Returns:
            The branch name.
        """
        return cls(f"{category.as_str()}/{ticket_key.strip()}/{slugify(summary)}")


# ============================================================================
# Branching strategies
# ============================================================================


class BranchingStrategy(ABC):
    """Policy that turns a ticket key and a summary into a branch name."""

    name: str = ""

    @abstractmethod
    def build(self, category: BranchCategory, ticket_key: str, summary: str) -> BranchName:
        """Build the branch name for a created ticket."""
        pass


class CategorizedBranching(BranchingStrategy):
    """"{category}/{ticket_key}/{slug}" (default)."""

    name = "categorized"

    def build(self, category: BranchCategory, ticket_key: str, summary: str) -> BranchName:
        return BranchName.from_parts(category, ticket_key, summary)


class PrefixedBranching(BranchingStrategy):
    """"{prefix}/{ticket_key}-{slug}" with a fixed literal prefix."""

    name = "prefixed"

    def __init__(self, prefix: str = "feature"):
        self.prefix = prefix.strip().strip("/") or "feature"

    def build(self, category: BranchCategory, ticket_key: str, summary: str) -> BranchName:
        return BranchName(f"{self.prefix}/{ticket_key.strip()}-{slugify(summary)}")


class RawBranching(BranchingStrategy):
    """"{ticket_key}-{slug}" with no prefix."""

    name = "raw"

    def build(self, category: BranchCategory, ticket_key: str, summary: str) -> BranchName:
        return BranchName(f"{ticket_key.strip()}-{slugify(summary)}")


BRANCHING_STRATEGIES = ("categorized", "prefixed", "raw")


def get_branching_strategy(name: str | None = None, prefix: str | None = None) -> BranchingStrategy:
    """Return the strategy configured for this run.

    Args:
        name: Strategy name (categorized, prefixed, raw). Defaults to categorized.
        prefix: Literal prefix for the prefixed strategy.

    Returns:
        A BranchingStrategy instance.

    Raises:
        ConfigurationError: If the strategy name is unknown.
    """
    key = (name or "categorized").strip().lower()

    if key == "categorized":
        return CategorizedBranching()
    elif key == "prefixed":
        return PrefixedBranching(prefix or "feature")
    elif key == "raw":
        return RawBranching()
    else:
        raise ConfigurationError(
            f"Unknown branch strategy: {name}. "
            f"Valid strategies: {', '.join(BRANCHING_STRATEGIES)}"
        )
