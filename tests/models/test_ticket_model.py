"""Tests for src/models/ticket.py."""

import pytest

from src.models.ticket import Ticket, TicketsDocument


class TestEscalationFlag:
    @pytest.mark.parametrize("raw, expected", [
        (1, True),
        (True, True),
        (0, False),
        (False, False),
        (2, False),
        ("1", False),
        ("true", False),
        (1.0, False),
        (None, False),
    ])
    def test_only_one_and_true_escalate(self, raw, expected):
        assert Ticket.model_validate({"escalated": raw}).escalated is expected

    def test_missing_is_not_escalated(self):
        assert Ticket.model_validate({}).escalated is False


class TestTicketState:
    def test_open_ticket_is_active(self):
        assert Ticket.model_validate({"status": "open"}).is_active

    def test_resolved_ticket_is_not_active(self):
        assert not Ticket.model_validate({"status": "resolved"}).is_active

    def test_successful_ticket_is_not_active(self):
        assert not Ticket.model_validate({"status": "open", "result": "success"}).is_active

    def test_non_string_result_has_no_result(self):
        ticket = Ticket.model_validate({"result": 1})
        assert ticket.result is None
        assert not ticket.has_result

    def test_failure_result_counts_as_result(self):
        ticket = Ticket.model_validate({"result": "failure"})
        assert ticket.has_result
        assert not ticket.is_success


class TestAgeKey:
    def test_prefers_timestamp(self):
        ticket = Ticket.model_validate(
            {"timestamp": "2026-03-10T08:00:00.000Z", "created_at": "2026-01-01T00:00:00.000Z"}
        )
        assert ticket.age_key == "2026-03-10T08:00:00.000Z"

    def test_falls_back_to_created_at(self):
        ticket = Ticket.model_validate({"created_at": "2026-01-01T00:00:00.000Z"})
        assert ticket.age_key == "2026-01-01T00:00:00.000Z"

    @pytest.mark.parametrize("timestamp", [None, "", 17])
    def test_present_but_unusable_timestamp_blocks_fallback(self, timestamp):
        ticket = Ticket.model_validate(
            {"timestamp": timestamp, "created_at": "2026-03-10T11:00:00.000Z"}
        )
        assert ticket.age_key == ""

    def test_empty_when_undated(self):
        assert Ticket.model_validate({"ticket_id": "t1"}).age_key == ""

    def test_non_object_ticket_is_undated(self):
        assert Ticket.model_validate(["t1"]).age_key == ""


class TestTicketsDocument:
    def test_missing_array_is_none(self):
        assert TicketsDocument.model_validate({"nextId": 3}).tickets is None

    def test_mistyped_array_is_none(self):
        assert TicketsDocument.model_validate({"tickets": "none"}).tickets is None

    def test_parsed_keeps_order_and_length(self):
        document = TicketsDocument.model_validate(
            {"tickets": [{"ticket_id": "a"}, "junk", {"ticket_id": "c"}]}
        )
        assert [t.ticket_id for t in document.parsed()] == ["a", None, "c"]
