"""
Unit tests for swachhta_prahari.domain.services.severity
"""
import pytest

from swachhta_prahari.domain.services.severity import (
    determine_severity,
    detection_score,
    is_above_threshold,
    describe_incident,
    severity_to_priority,
    validate_detection_payload,
)


class TestDetermineSeverity:
    """Tests for determine_severity"""

    def test_illegal_dumping_high_confidence_is_critical(self):
        assert detection_score("illegal_dumping", 0.9) == pytest.approx(2.7)
        assert determine_severity("illegal_dumping", 0.9) == "critical"

    def test_cleanliness_violation_is_low(self):
        assert determine_severity("cleanliness_violation", 0.95) == "low"

    @pytest.mark.parametrize(
        "incident_type,confidence,expected",
        [
            ("illegal_dumping", 2.5 / 3, "critical"),  # score 2.5
            ("overflow", 1.0, "high"),       # score 2.0
            ("overflow", 0.75, "medium"),    # score 1.5
            ("illegal_dumping", 0.5, "medium"),
            ("drain_clogging", 0.7, "low"),  # score 1.4
        ],
    )
    def test_boundaries_resolve_to_higher_tier(self, incident_type, confidence, expected):
        assert determine_severity(incident_type, confidence) == expected

    @pytest.mark.parametrize(
        "incident_type,confidence,expected",
        [
            ("illegal_dumping", 0.8333333333, "high"),  # score 2.4999999999
            ("overflow", 0.9999999999, "medium"),       # score 1.9999999998
            ("overflow", 0.7499999999, "low"),          # score 1.4999999998
        ],
    )
    def test_just_below_cutoff_stays_in_lower_tier(self, incident_type, confidence, expected):
        assert determine_severity(incident_type, confidence) == expected

    def test_unknown_type_weighs_one(self):
        assert detection_score("smoke", 0.9) == pytest.approx(0.9)
        assert determine_severity("smoke", 0.9) == "low"

    def test_is_pure(self):
        results = {determine_severity("overflow", 0.88) for _ in range(5)}
        assert results == {"medium"}


class TestThreshold:
    """Tests for is_above_threshold"""

    def test_equal_to_threshold_passes(self):
        assert is_above_threshold(0.85, 0.85) is True

    def test_below_threshold_fails(self):
        assert is_above_threshold(0.84, 0.85) is False

    def test_default_threshold(self):
        assert is_above_threshold(0.9) is True
        assert is_above_threshold(0.8) is False


class TestHelpers:
    def test_describe_incident_mentions_camera(self):
        assert describe_incident("overflow", "Gate Camera") == "Waste container overflow detected at Gate Camera"

    def test_describe_unknown_type(self):
        assert "Gate Camera" in describe_incident("smoke", "Gate Camera")

    def test_priority_order(self):
        priorities = [severity_to_priority(s) for s in ("low", "medium", "high", "critical")]
        assert priorities == [1, 2, 3, 4]


class TestValidateDetectionPayload:
    """Tests for validate_detection_payload"""

    def _payload(self, **overrides):
        payload = {
            "cameraId": "CAM-001",
            "detection": {"type": "overflow", "confidence": 0.9},
            "timestamp": "2025-01-10T08:00:00Z",
        }
        payload.update(overrides)
        return payload

    def test_valid_payload_has_no_errors(self):
        assert validate_detection_payload(self._payload()) == []

    def test_missing_everything(self):
        errors = validate_detection_payload({})
        assert "Camera ID is required" in errors
        assert "Detection data is required" in errors
        assert "Timestamp is required" in errors

    def test_invalid_type(self):
        errors = validate_detection_payload(self._payload(detection={"type": "smoke", "confidence": 0.9}))
        assert errors == ["Invalid detection type"]

    def test_confidence_out_of_range(self):
        errors = validate_detection_payload(self._payload(detection={"type": "overflow", "confidence": 1.2}))
        assert errors == ["Confidence must be between 0 and 1"]

    def test_boolean_confidence_rejected(self):
        errors = validate_detection_payload(self._payload(detection={"type": "overflow", "confidence": True}))
        assert errors == ["Confidence score is required"]

    def test_bad_timestamp(self):
        errors = validate_detection_payload(self._payload(timestamp="yesterday"))
        assert errors == ["Timestamp must be an ISO 8601 date"]
