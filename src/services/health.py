"""
Health service — view-models for the health tab.

Three independent derivations, each reading one monitoring-service file and
each coming back empty when that file is missing or malformed:

  health scores      <- state-tracker.json
  patterns           <- pattern-detector.json   (first 20)
  proactive actions  <- pending-actions.json    (first 10)

Mappings are walked in the order their keys appear in the file. When two
resource keys share a display name, the one later in the file wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.models.health import (
    PatternDetectorDocument,
    PendingActionsDocument,
    ResourceState,
    StateTrackerDocument,
)
from src.models.ipc import HealthData, HealthScore, PatternView, ProactiveAction
from src.utils.json_store import (
    PATTERN_DETECTOR_FILE,
    PENDING_ACTIONS_FILE,
    STATE_TRACKER_FILE,
    load_document,
)

logger = logging.getLogger(__name__)

_PATTERN_LIMIT = 20
_ACTION_LIMIT = 10

_SEVERITY_SCORES: dict[str, int] = {
    "critical": 20,
    "error": 40,
    "warning": 65,
}
_HEALTHY_SCORE = 100

_STATE_TRENDS: dict[str, str] = {
    "critical": "degrading",
    "error": "degrading",
    "warning": "stable",
}
_DEFAULT_TREND = "improving"


def display_name(resource_key: str) -> str:
    """Map "cpu:load" to "load"; keys without a colon are used as-is."""
    parts = resource_key.split(":")
    return parts[1] if len(parts) > 1 else resource_key


def score_resource(resource: ResourceState) -> HealthScore:
    return HealthScore(
        score=_SEVERITY_SCORES.get(resource.severity_level, _HEALTHY_SCORE),
        trend=_STATE_TRENDS.get(resource.current_state, _DEFAULT_TREND),
    )


def build_health_scores(data_dir: Path) -> dict[str, HealthScore]:
    document = load_document(data_dir / STATE_TRACKER_FILE, StateTrackerDocument)
    scores: dict[str, HealthScore] = {}
    for key, resource in document.resources.items():
        scores[display_name(key)] = score_resource(resource)
    return scores


def build_patterns(data_dir: Path) -> list[PatternView]:
    document = load_document(data_dir / PATTERN_DETECTOR_FILE, PatternDetectorDocument)
    views: list[PatternView] = []
    for key, entry in list(document.patterns.items())[:_PATTERN_LIMIT]:
        views.append(
            PatternView(
                pattern_id=key,
                signal_id=key,
                occurrence_count=entry.occurrence_count,
                trend=entry.trend,
                frequency=entry.frequency,
                urgency=entry.urgency,
                recommendation=entry.recommendation,
            )
        )
    return views


def build_proactive_actions(data_dir: Path) -> list[ProactiveAction]:
    document = load_document(data_dir / PENDING_ACTIONS_FILE, PendingActionsDocument)
    return [
        ProactiveAction(
            title=action.signature_id,
            urgency=action.signature.severity,
            reasoning=action.server_message,
        )
        for action in document.pending_actions[:_ACTION_LIMIT]
    ]


def get_health_data(data_dir: Path) -> HealthData:
    """Assemble the health tab payload. Never fails."""
    health = HealthData(
        health_scores=build_health_scores(data_dir),
        correlations={},
        patterns=build_patterns(data_dir),
        proactive_actions=build_proactive_actions(data_dir),
    )
    logger.debug(
        f"Health data: {len(health.health_scores)} resource(s), "
        f"{len(health.patterns)} pattern(s), {len(health.proactive_actions)} action(s)"
    )
    return health
