"""
Detection scoring rules.

Pure functions shared by the detection webhook, manual incident creation
and reporting. Nothing in here touches storage or the network.
"""

# Standard library imports
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

# Local application imports
from ..constants.enums import IncidentType, Severity, Thresholds


TYPE_WEIGHTS: Dict[str, int] = {
    IncidentType.ILLEGAL_DUMPING.value: 3,
    IncidentType.OVERFLOW.value: 2,
    IncidentType.DRAIN_CLOGGING.value: 2,
    IncidentType.CLEANLINESS_VIOLATION.value: 1,
}
DEFAULT_TYPE_WEIGHT = 1

# (minimum score, severity), checked from the top
SEVERITY_CUTOFFS = (
    (2.5, Severity.CRITICAL),
    (2.0, Severity.HIGH),
    (1.5, Severity.MEDIUM),
)

SEVERITY_PRIORITY: Dict[str, int] = {
    Severity.LOW.value: 1,
    Severity.MEDIUM.value: 2,
    Severity.HIGH.value: 3,
    Severity.CRITICAL.value: 4,
}

_DESCRIPTIONS = {
    IncidentType.ILLEGAL_DUMPING.value: "Illegal waste dumping activity detected at {camera}",
    IncidentType.OVERFLOW.value: "Waste container overflow detected at {camera}",
    IncidentType.DRAIN_CLOGGING.value: "Drain blockage or overflow detected at {camera}",
    IncidentType.CLEANLINESS_VIOLATION.value: "Cleanliness violation detected at {camera}",
}

# Float error allowed when a score is compared with a cutoff
_CUTOFF_TOLERANCE = 1e-12


def type_weight(incident_type: str) -> int:
    return TYPE_WEIGHTS.get(incident_type, DEFAULT_TYPE_WEIGHT)


def detection_score(incident_type: str, confidence: float) -> float:
    """Weighted score of a detection: type weight times model confidence."""
    return type_weight(incident_type) * confidence


def determine_severity(incident_type: str, confidence: float) -> str:
    """
    Map a detection to a severity tier.

    A score sitting exactly on a cutoff resolves to the higher tier.

    Args:
        incident_type: One of the IncidentType values; unknown types weigh 1
        confidence: Model confidence in [0, 1]

    Returns:
        Severity value string
    """
    score = detection_score(incident_type, confidence)
    for cutoff, severity in SEVERITY_CUTOFFS:
        if score + _CUTOFF_TOLERANCE >= cutoff:
            return severity.value
    return Severity.LOW.value


def is_above_threshold(confidence: float, threshold: Optional[float] = None) -> bool:
    """True when the detection meets the camera's confidence threshold."""
    if threshold is None:
        threshold = Thresholds.AI_CONFIDENCE_DEFAULT
    return confidence >= threshold


def describe_incident(incident_type: str, camera_name: str) -> str:
    template = _DESCRIPTIONS.get(incident_type, "Environmental issue detected at {camera}")
    return template.format(camera=camera_name)


def severity_to_priority(severity: str) -> int:
    return SEVERITY_PRIORITY.get(severity, 1)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_detection_payload(payload: Mapping[str, Any]) -> List[str]:
    """
    Check the shape of a detection webhook payload.

    Returns:
        List of human-readable errors; empty when the payload is usable
    """
    errors: List[str] = []
    if not payload.get("cameraId"):
        errors.append("Camera ID is required")

    detection = payload.get("detection")
    if not isinstance(detection, Mapping):
        errors.append("Detection data is required")
        detection = {}

    detection_type = detection.get("type")
    confidence = detection.get("confidence")
    if not detection_type:
        errors.append("Detection type is required")
    elif detection_type not in TYPE_WEIGHTS:
        errors.append("Invalid detection type")

    if not _is_number(confidence):
        errors.append("Confidence score is required")
    elif confidence < 0 or confidence > 1:
        errors.append("Confidence must be between 0 and 1")

    timestamp = payload.get("timestamp")
    if not timestamp:
        errors.append("Timestamp is required")
    elif isinstance(timestamp, str):
        try:
            datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        except ValueError:
            errors.append("Timestamp must be an ISO 8601 date")

    return errors
