"""Tests for src/models/health.py — monitoring-service health documents."""

from src.models.health import (
    PatternDetectorDocument,
    PendingActionsDocument,
    StateTrackerDocument,
)


class TestStateTrackerDocument:
    def test_defaults_for_missing_fields(self):
        document = StateTrackerDocument.model_validate({"resources": {"cpu:load": {}}})
        resource = document.resources["cpu:load"]
        assert resource.severity_level == "info"
        assert resource.current_state == "ok"

    def test_non_object_resource_gets_defaults(self):
        document = StateTrackerDocument.model_validate({"resources": {"cpu:load": "critical"}})
        assert document.resources["cpu:load"].severity_level == "info"

    def test_key_order_preserved(self):
        keys = ["z:last", "a:first", "m:middle"]
        document = StateTrackerDocument.model_validate({"resources": {k: {} for k in keys}})
        assert list(document.resources) == keys


class TestPatternDetectorDocument:
    def test_mistyped_fields_fall_back(self):
        document = PatternDetectorDocument.model_validate({"patterns": {"sig-1": {
            "occurrenceCount": "many",
            "trend": 3,
            "frequency": "often",
            "urgency": None,
            "recommendation": ["restart"],
        }}})
        entry = document.patterns["sig-1"]
        assert entry.occurrence_count == 0
        assert entry.trend == "stable"
        assert entry.frequency == 0.0
        assert entry.urgency == "low"
        assert entry.recommendation == ""

    def test_missing_patterns_is_empty(self):
        assert PatternDetectorDocument.model_validate({"version": 2}).patterns == {}


class TestPendingActionsDocument:
    def test_nested_severity(self):
        document = PendingActionsDocument.model_validate({"pending_actions": [
            {"signature_id": "restart-spooler", "signature": {"severity": "high"}},
        ]})
        assert document.pending_actions[0].signature.severity == "high"

    def test_signature_not_an_object(self):
        document = PendingActionsDocument.model_validate({"pending_actions": [
            {"signature_id": "restart-spooler", "signature": "high"},
        ]})
        assert document.pending_actions[0].signature.severity == "low"

    def test_non_object_entries_get_defaults(self):
        document = PendingActionsDocument.model_validate({"pending_actions": [None, 7]})
        assert [a.signature_id for a in document.pending_actions] == ["Action", "Action"]

    def test_pending_actions_not_a_list(self):
        document = PendingActionsDocument.model_validate({"pending_actions": {"a": 1}})
        assert document.pending_actions == []
