"""Jira issue tracker client."""

from typing import Optional

import httpx

from ugh.config import DEFAULT_ISSUE_TYPE, DEFAULT_REQUEST_TIMEOUT
from ugh.domain import Ticket, TicketDraft
from ugh.errors import ConfigurationError, IssueTrackerError, LanguageModelError
from ugh.logging import get_logger
from ugh.services import IssueTrackerService

logger = get_logger("jira")

CREATE_ISSUE_PATH = "/rest/api/2/issue"


def _error_details(response: httpx.Response) -> str:
    """Extract Jira's errorMessages/errors from a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()

    if not isinstance(body, dict):
        return str(body)

    details = list(body.get("errorMessages") or [])
    for field, message in (body.get("errors") or {}).items():
        details.append(f"{field}: {message}")
    return "; ".join(details) or response.text.strip()


class JiraClient(IssueTrackerService):
    """Creates Jira issues through the REST API with basic auth."""

    def __init__(
        self,
        base_url: Optional[str],
        email: Optional[str],
        token: Optional[str],
        issue_type: str = DEFAULT_ISSUE_TYPE,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Jira site, e.g. https://company.atlassian.net.
            email: Account email for basic auth.
            token: API token for basic auth.
            issue_type: Issue type name for created tickets.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/") if base_url else None
        self.email = email
        self.token = token
        self.issue_type = issue_type
        self.timeout = timeout
        self.transport = transport

    def _require_settings(self) -> None:
        missing = [
            name
            for name, value in (
                ("Jira base URL", self.base_url),
                ("Jira email", self.email),
                ("Jira API token", self.token),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"missing Jira settings: {', '.join(missing)}")

    def build_payload(self, board: str, draft: TicketDraft) -> dict:
        """Build the create-issue request body."""
        return {
            "fields": {
                "project": {"key": board},
                "summary": draft.title.strip(),
                "description": draft.description,
                "issuetype": {"name": self.issue_type},
            }
        }

    def create_ticket(self, board: str, draft: TicketDraft) -> Ticket:
        """Create a Jira issue from a draft.

        Args:
            board: Jira project key.
            draft: Validated ticket draft.

        Returns:
            The created Ticket with its browse URL.

        Raises:
            IssueTrackerError: If the board is empty, the request fails or Jira rejects it.
            LanguageModelError: If the draft title is empty.
            ConfigurationError: If Jira connection settings are missing.
        """
        board = board.strip()
        if not board:
            raise IssueTrackerError("board key must not be empty")
        if not draft.title.strip():
            raise LanguageModelError("language model returned an empty title")

        self._require_settings()

        url = f"{self.base_url}{CREATE_ISSUE_PATH}"
        logger.debug("Creating Jira issue on board %s", board)

        try:
            with httpx.Client(
                auth=(self.email, self.token),
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = client.post(
                    url,
                    json=self.build_payload(board, draft),
                    headers={"Accept": "application/json"},
                )
        except httpx.TimeoutException as e:
            raise IssueTrackerError(f"Jira request timed out after {self.timeout}s: {e}")
        except httpx.HTTPError as e:
            raise IssueTrackerError(f"Jira request failed: {e}")

        if not response.is_success:
            raise IssueTrackerError(
                f"Jira rejected the ticket (status {response.status_code}): {_error_details(response)}"
            )

        try:
            key = response.json()["key"]
        except (ValueError, KeyError, TypeError):
            raise IssueTrackerError(f"Jira response did not include an issue key: {response.text.strip()}")

        return Ticket(key=key, url=f"{self.base_url}/browse/{key}")
