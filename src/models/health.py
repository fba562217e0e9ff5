"""
Health models — the three monitoring-service documents behind the health tab.

  state-tracker.json     -> StateTrackerDocument  (resources keyed "<category>:<name>")
  pattern-detector.json  -> PatternDetectorDocument (patterns keyed by signal id)
  pending-actions.json   -> PendingActionsDocument  (pending_actions array)

All three are read-only here. Mapping order is the order of keys in the file.
"""

from __future__ import annotations

from pydantic import Field

from src.models.document import Count, ExternalDocument, Number, Text


# ---------------------------------------------------------------------------
# state-tracker.json
# ---------------------------------------------------------------------------

class ResourceState(ExternalDocument):
    severity_level: Text = Field(default="info", alias="severityLevel")
    current_state: Text = Field(default="ok", alias="currentState")


class StateTrackerDocument(ExternalDocument):
    resources: dict[str, ResourceState] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# pattern-detector.json
# ---------------------------------------------------------------------------

class PatternEntry(ExternalDocument):
    occurrence_count: Count = Field(default=0, alias="occurrenceCount")
    trend: Text = "stable"
    frequency: Number = 0.0
    urgency: Text = "low"
    recommendation: Text = ""


class PatternDetectorDocument(ExternalDocument):
    patterns: dict[str, PatternEntry] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# pending-actions.json
# ---------------------------------------------------------------------------

class ActionSignature(ExternalDocument):
    severity: Text = "low"


class PendingAction(ExternalDocument):
    signature_id: Text = "Action"
    signature: ActionSignature = Field(default_factory=ActionSignature)
    server_message: Text = ""


class PendingActionsDocument(ExternalDocument):
    pending_actions: list[PendingAction] = Field(default_factory=list)
