"""
IPC contracts — typed inputs and outputs for every front-end command.

The GUI speaks camelCase JSON; Python code uses snake_case attributes. Every
model here accepts either spelling and serializes by alias, so FastAPI
responses come out in the shape the front-end expects.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# getStats
# ---------------------------------------------------------------------------

class Stats(_CamelModel):
    issues_detected: int = 0
    active_tickets: int = 0
    issues_escalated: int = 0
    success_rate: int = Field(default=0, ge=0, le=100)


# ---------------------------------------------------------------------------
# submitManualTicket
# ---------------------------------------------------------------------------

class ManualTicketRequest(_CamelModel):
    server_name: str
    category: str
    description: str
    priority: str
    submitted_at: str   # ISO-8601, stamped by the front-end


# ---------------------------------------------------------------------------
# updateSettings: every field optional, None means "leave untouched"
# ---------------------------------------------------------------------------

class SettingsUpdate(_CamelModel):
    # strict: "30", true and 80.0 are rejected rather than written as 30, 1 and 80
    server_url: Optional[StrictStr] = None
    monitor_interval: Optional[StrictInt] = None
    alert_email: Optional[StrictStr] = None
    log_retention: Optional[StrictInt] = None
    confidence_threshold: Optional[StrictInt] = None

    def changes(self) -> dict[str, Any]:
        """Return the provided fields keyed by their agent.config.json names."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# getHealthData
# ---------------------------------------------------------------------------

class HealthScore(_CamelModel):
    score: int
    trend: str


class PatternView(_CamelModel):
    pattern_id: str
    signal_id: str
    occurrence_count: int = 0
    trend: str = "stable"
    frequency: float = 0.0
    urgency: str = "low"
    recommendation: str = ""


class ProactiveAction(_CamelModel):
    title: str = "Action"
    urgency: str = "low"
    reasoning: str = ""


class HealthData(_CamelModel):
    health_scores: dict[str, HealthScore] = Field(default_factory=dict)
    correlations: dict[str, Any] = Field(default_factory=dict)  # not produced yet; always empty
    patterns: list[PatternView] = Field(default_factory=list)
    proactive_actions: list[ProactiveAction] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Mutation results
# ---------------------------------------------------------------------------

class RemovedCount(_CamelModel):
    removed: int


class CommandResult(_CamelModel):
    success: bool
