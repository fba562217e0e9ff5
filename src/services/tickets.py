"""
Ticket service — stats, listing and the three ticket-log mutations.

tickets.json is owned by the monitoring service; this module reads it through
TicketsDocument and writes it back as raw JSON so unknown fields survive.

Retention compares ISO-8601 strings lexicographically. That is only correct
because the format sorts the same way as time does, so the cutoff must be
rendered in the same UTC ISO-8601 shape the monitoring service writes.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Optional

from src.models.ipc import ManualTicketRequest, Stats
from src.models.ticket import Ticket, TicketsDocument
from src.utils.json_store import TICKETS_FILE, load_document, read_json, write_json

logger = logging.getLogger(__name__)

_LIST_LIMIT = 100
_RETENTION = timedelta(hours=24)

_MANUAL_ID_PREFIX = "manual-"
_MANUAL_TYPE = "manual-review"
_MANUAL_SOURCE = "manual"
_OPEN_STATUS = "open"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _retention_cutoff() -> str:
    return (_now() - _RETENTION).isoformat(timespec="microseconds")


def _load_ticket_log(path: Path) -> Optional[dict[str, Any]]:
    """Return the raw tickets.json object, or None if it has no usable tickets array."""
    raw = read_json(path)
    if not isinstance(raw, dict) or not isinstance(raw.get("tickets"), list):
        return None
    return raw


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def get_stats(data_dir: Path) -> Stats:
    """Summarize the ticket log for the dashboard header. Never fails."""
    document = load_document(data_dir / TICKETS_FILE, TicketsDocument)
    if document.tickets is None:
        return Stats()

    tickets = document.parsed()
    with_result = sum(1 for t in tickets if t.has_result)
    succeeded = sum(1 for t in tickets if t.is_success)

    return Stats(
        issues_detected=len(tickets),
        active_tickets=sum(1 for t in tickets if t.is_active),
        issues_escalated=sum(1 for t in tickets if t.escalated),
        success_rate=(succeeded * 100) // with_result if with_result else 0,
    )


def get_tickets(data_dir: Path) -> list[Any]:
    """Return up to the first 100 tickets verbatim, newest first as stored."""
    document = load_document(data_dir / TICKETS_FILE, TicketsDocument)
    return list((document.tickets or [])[:_LIST_LIMIT])


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------

def clear_old_tickets(data_dir: Path) -> int:
    """Drop tickets older than the retention window and return how many went.

    A ticket's age comes from ``timestamp``, else ``created_at``. Tickets with
    neither sort before any real timestamp and are always dropped.
    """
    path = data_dir / TICKETS_FILE
    log = _load_ticket_log(path)
    if log is None:
        return 0

    cutoff = _retention_cutoff()
    tickets = log["tickets"]
    kept = [raw for raw in tickets if Ticket.model_validate(raw).age_key >= cutoff]
    removed = len(tickets) - len(kept)

    log["tickets"] = kept
    if not write_json(path, log):
        logger.warning(f"Pruned {removed} ticket(s) but could not save {path}")
    elif removed:
        logger.info(f"Pruned {removed} ticket(s) older than {cutoff}")
    return removed


def clear_all_tickets(data_dir: Path) -> int:
    """Empty the ticket log, keeping any other top-level keys. Returns the count removed."""
    path = data_dir / TICKETS_FILE
    log = _load_ticket_log(path)
    if log is None:
        return 0

    removed = len(log["tickets"])
    log["tickets"] = []
    if not write_json(path, log):
        logger.warning(f"Cleared {removed} ticket(s) but could not save {path}")
    return removed


def build_manual_ticket(request: ManualTicketRequest) -> dict[str, Any]:
    epoch_ms = int(_now().timestamp() * 1000)
    return {
        "ticket_id": f"{_MANUAL_ID_PREFIX}{epoch_ms}",
        "timestamp": request.submitted_at,
        "type": _MANUAL_TYPE,
        "issue_type": request.category,
        "description": request.description,
        "priority": request.priority,
        "status": _OPEN_STATUS,
        "source": _MANUAL_SOURCE,
        "computer_name": request.server_name,
    }


def submit_manual_ticket(data_dir: Path, request: ManualTicketRequest) -> bool:
    """Prepend a manually filed ticket, creating tickets.json if needed.

    Returns:
        True if the log was written, False on I/O or serialization failure.
    """
    path = data_dir / TICKETS_FILE
    raw = read_json(path)
    log: dict[str, Any] = raw if isinstance(raw, dict) else {}
    if not isinstance(log.get("tickets"), list):
        log["tickets"] = []

    ticket = build_manual_ticket(request)
    log["tickets"].insert(0, ticket)

    saved = write_json(path, log)
    if saved:
        logger.info(f"Manual ticket {ticket['ticket_id']} filed for {request.server_name}")
    return saved
