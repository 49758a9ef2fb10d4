"""
Unit tests for identifiers and incident status transitions
"""
from datetime import datetime

import pytest

from swachhta_prahari.domain.exceptions import InvalidStateTransitionError, ConflictError
from swachhta_prahari.domain.services import (
    format_incident_id,
    generate_report_id,
    ensure_transition_allowed,
)


class TestIncidentId:
    def test_format(self):
        assert format_incident_id(1700000000000, 7) == "INC-1700000000000-0007"

    def test_sequence_orders_ids_created_in_same_millisecond(self):
        first = format_incident_id(1700000000000, 1)
        second = format_incident_id(1700000000000, 2)
        assert first != second
        assert first < second

    def test_sequence_past_four_digits_is_not_truncated(self):
        assert format_incident_id(1700000000000, 10000) == "INC-1700000000000-10000"
        assert format_incident_id(1700000000000, 10000) != format_incident_id(1700000000000, 1000)


class TestReportId:
    def test_format(self):
        assert generate_report_id(datetime(2025, 3, 4, 10, 0), 7) == "RPT-20250304-0007"

    def test_distinct_sequences_give_distinct_ids(self):
        now = datetime(2025, 3, 4, 10, 0)
        assert generate_report_id(now, 1) != generate_report_id(now, 2)


class TestTransitions:
    @pytest.mark.parametrize("current", ["detected", "pending", "in_progress", "resolved"])
    def test_non_terminal_may_move_anywhere(self, current):
        ensure_transition_allowed(current, "false_positive")
        ensure_transition_allowed(current, "detected")

    def test_false_positive_is_terminal(self):
        with pytest.raises(InvalidStateTransitionError):
            ensure_transition_allowed("false_positive", "resolved")

    def test_terminal_error_is_a_conflict(self):
        with pytest.raises(ConflictError) as exc_info:
            ensure_transition_allowed("false_positive", "pending")
        assert exc_info.value.status_code == 409
