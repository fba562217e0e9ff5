"""
Ticket models — read-side view of tickets.json.

The ticket log is shared with the monitoring service, which adds fields of its
own. These models are only used to *read* tickets; writes always go back
through the raw JSON so that fields this backend does not know are preserved.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import BeforeValidator

from src.models.document import ExternalDocument, JsonArray, Text

RESOLVED_STATUS = "resolved"
SUCCESS_RESULT = "success"


def _escalation_flag(value: Any) -> bool:
    # The monitoring service writes 0/1; older builds wrote booleans.
    if isinstance(value, bool):
        return value
    return isinstance(value, int) and value == 1


EscalationFlag = Annotated[bool, BeforeValidator(_escalation_flag)]


class Ticket(ExternalDocument):
    ticket_id: Optional[Text] = None
    timestamp: Optional[Text] = None
    created_at: Optional[Text] = None
    type: Optional[Text] = None
    status: Optional[Text] = None
    result: Optional[Text] = None
    escalated: EscalationFlag = False
    issue_type: Optional[Text] = None
    description: Optional[Text] = None
    priority: Optional[Text] = None
    source: Optional[Text] = None
    computer_name: Optional[Text] = None

    @property
    def is_active(self) -> bool:
        return self.status != RESOLVED_STATUS and self.result != SUCCESS_RESULT

    @property
    def has_result(self) -> bool:
        return self.result is not None

    @property
    def is_success(self) -> bool:
        return self.result == SUCCESS_RESULT

    @property
    def age_key(self) -> str:
        """ISO-8601 timestamp used for retention; "" when the ticket has none.

        ``created_at`` only stands in when the ``timestamp`` key is absent. A
        present but null or non-string ``timestamp`` still yields "".
        """
        if "timestamp" in self.model_fields_set:
            return self.timestamp or ""
        return self.created_at or ""


class TicketsDocument(ExternalDocument):
    """tickets.json; ``tickets`` is None when the array is missing or mistyped."""

    tickets: Optional[JsonArray] = None

    def parsed(self) -> list[Ticket]:
        return [Ticket.model_validate(raw) for raw in self.tickets or []]
