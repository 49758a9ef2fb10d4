from .severity import (
    TYPE_WEIGHTS,
    detection_score,
    determine_severity,
    is_above_threshold,
    describe_incident,
    severity_to_priority,
    validate_detection_payload,
)
from .cleanliness import cleanliness_index, zone_cleanliness
from .identifiers import format_incident_id, generate_report_id
from .incident_lifecycle import ensure_transition_allowed, TERMINAL_STATUSES

__all__ = [
    "TYPE_WEIGHTS",
    "detection_score",
    "determine_severity",
    "is_above_threshold",
    "describe_incident",
    "severity_to_priority",
    "validate_detection_payload",
    "cleanliness_index",
    "zone_cleanliness",
    "format_incident_id",
    "generate_report_id",
    "ensure_transition_allowed",
    "TERMINAL_STATUSES",
]
