"""Language-model ticket drafting with heuristic fallback."""

from typing import Optional

from ugh.config import AppConfig
from ugh.domain import ChangeSummary, TicketDraft
from ugh.drafting.heuristics import heuristic_draft, infer_branch_summary, infer_category
from ugh.llm import BaseLLMProvider, LLMError, MissingAPIKeyError, get_provider
from ugh.llm.parsing import parse_json_response, validate_draft_json
from ugh.llm.prompts import SYSTEM_PROMPT, build_user_prompt
from ugh.logging import get_logger
from ugh.services import LanguageModelService

logger = get_logger("drafting")


class DraftGenerator(LanguageModelService):
    """Drafts tickets with an LLM, falling back to heuristics on any failure.

    Only a missing API key escapes draft_ticket; transport errors, timeouts,
    bad status codes, empty responses, unparseable JSON and invalid fields
    all produce the heuristic draft instead.
    """

    def __init__(self, provider: Optional[BaseLLMProvider]):
        """Initialize the generator.

        Args:
            provider: The LLM provider, or None to always use heuristics.
        """
        self.provider = provider

    @classmethod
    def from_config(cls, config: AppConfig) -> "DraftGenerator":
        """Build a generator for the configured provider and model."""
        provider = get_provider(
            config.llm_provider,
            model=config.llm_model,
            timeout=config.request_timeout,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
        return cls(provider)

    def draft_ticket(self, changes: ChangeSummary) -> TicketDraft:
        """Draft a ticket for the given changes.

        Args:
            changes: The local change summary.

        Returns:
            A TicketDraft with all four fields non-empty.

        Raises:
            MissingAPIKeyError: If the provider has no API key configured.
        """
        fallback = heuristic_draft(changes)
        if self.provider is None:
            return fallback

        user_prompt = build_user_prompt(changes, infer_category(changes), infer_branch_summary(changes))

        try:
            result = self.provider.generate_raw(SYSTEM_PROMPT, user_prompt)
            parsed = parse_json_response(result.raw_response)
            draft = validate_draft_json(parsed, fallback_summary=fallback.branch_summary)
        except MissingAPIKeyError:
            raise
        except LLMError as e:
            logger.warning("Using heuristic ticket draft: %s", e)
            return fallback

        logger.debug(
            "Drafted ticket with %s (%d input / %d output tokens)",
            result.model,
            result.input_tokens,
            result.output_tokens,
        )
        return draft
