"""Builds the sections of a report from the incidents in its period"""

# Standard library imports
from collections import Counter
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

# Local application imports
from ....core.time_utils import start_of_day
from ....domain.constants import ReportType, IncidentStatus, Severity
from ....domain.exceptions import ValidationFailedError
from ....domain.models.incident import Incident
from ....domain.services import cleanliness_index

_TYPE_LABELS = {
    "illegal_dumping": "illegal dumping",
    "overflow": "container overflow",
    "drain_clogging": "drain clogging",
    "cleanliness_violation": "cleanliness violation",
}

_RECOMMENDATIONS = {
    "illegal_dumping": "Increase patrols and signage near hotspots with repeated illegal dumping.",
    "overflow": "Raise waste collection frequency for containers that repeatedly overflow.",
    "drain_clogging": "Schedule preventive drain cleaning in affected zones.",
    "cleanliness_violation": "Brief site occupants on cleanliness rules and follow up on repeat violations.",
}


def resolve_period(
    report_type: str,
    now: datetime,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """
    Work out the reporting window for a report type.

    daily: today so far. weekly: the trailing seven days. monthly: the
    current calendar month so far. custom: the supplied dates, required.
    incident_summary: the supplied dates, defaulting to the trailing week.

    Raises:
        ValidationFailedError: If custom dates are missing or reversed
    """
    if report_type == ReportType.CUSTOM.value:
        if start_date is None or end_date is None:
            raise ValidationFailedError("Start date and end date are required for custom reports")
    elif report_type == ReportType.DAILY.value:
        return start_of_day(now), now
    elif report_type == ReportType.WEEKLY.value:
        return now - timedelta(days=7), now
    elif report_type == ReportType.MONTHLY.value:
        return start_of_day(now).replace(day=1), now
    else:
        start_date = start_date or now - timedelta(days=7)
        end_date = end_date or now

    if end_date < start_date:
        raise ValidationFailedError("End date must not precede start date")
    return start_date, end_date


def summarize_incident(incident: Incident) -> Dict[str, Any]:
    return {
        "incidentId": incident.incident_id,
        "timestamp": incident.created_at,
        "cameraId": incident.camera_id,
        "eventType": incident.type,
        "locationDetails": " - ".join(
            part for part in (incident.location.zone, incident.location.specific) if part
        ),
        "severity": incident.severity,
        "status": incident.status,
        "confidence": round(incident.ai_detection.confidence * 100),
        "resolvedAt": incident.response.resolved_at,
    }


def average_response_minutes(incidents: Sequence[Incident]) -> int:
    times = [
        minutes
        for minutes in (i.response_time_minutes for i in incidents if i.is_resolved)
        if minutes is not None
    ]
    return round(sum(times) / len(times)) if times else 0


def build_executive_summary(incidents: Sequence[Incident]) -> Dict[str, Any]:
    statuses = Counter(i.status for i in incidents)
    index = cleanliness_index(incidents)
    return {
        "totalIncidents": len(incidents),
        "resolvedIncidents": statuses.get(IncidentStatus.RESOLVED.value, 0),
        "pendingIncidents": sum(
            count for status, count in statuses.items()
            if status not in (IncidentStatus.RESOLVED.value, IncidentStatus.FALSE_POSITIVE.value)
        ),
        "falsePositives": statuses.get(IncidentStatus.FALSE_POSITIVE.value, 0),
        "criticalIncidents": sum(1 for i in incidents if i.severity == Severity.CRITICAL.value),
        "averageResponseTime": average_response_minutes(incidents),
        "cleanlinessIndex": index,
    }


def build_analytics(incidents: Sequence[Incident]) -> Dict[str, Any]:
    by_type = Counter(i.type for i in incidents)
    by_severity = Counter(i.severity for i in incidents)
    by_zone = Counter(i.location.zone for i in incidents if i.location.zone)
    by_day = Counter(i.created_at.strftime("%Y-%m-%d") for i in incidents if i.created_at)

    trends: List[str] = []
    if not incidents:
        trends.append("No incidents were recorded in this period.")
    else:
        busiest_day, day_count = max(sorted(by_day.items()), key=lambda item: item[1])
        trends.append(f"{len(incidents)} incidents recorded; peak of {day_count} on {busiest_day}.")
        if by_zone:
            zone, zone_count = by_zone.most_common(1)[0]
            trends.append(f"Zone {zone} accounted for {zone_count} incidents.")

    analysis = [
        f"{count} {_TYPE_LABELS.get(incident_type, incident_type)} incident(s)"
        for incident_type, count in by_type.most_common()
    ]
    high_impact = by_severity.get(Severity.CRITICAL.value, 0) + by_severity.get(Severity.HIGH.value, 0)
    if high_impact:
        analysis.append(f"{high_impact} incident(s) rated high or critical severity.")

    recommendations = [_RECOMMENDATIONS[t] for t, _ in by_type.most_common() if t in _RECOMMENDATIONS]
    if not recommendations:
        recommendations.append("Maintain current monitoring and collection schedules.")

    return {
        "byType": dict(by_type),
        "bySeverity": dict(by_severity),
        "byZone": dict(by_zone),
        "daily": dict(sorted(by_day.items())),
        "trends": trends,
        "analysis": analysis,
        "recommendations": recommendations,
        "cleanlinessIndex": cleanliness_index(incidents),
        "averageResponseTime": average_response_minutes(incidents),
    }


def build_conclusion(summary: Dict[str, Any]) -> str:
    total = summary["totalIncidents"]
    if total == 0:
        return "The site remained clean throughout the reporting period with no incidents detected."
    overall = summary["cleanlinessIndex"]["overall"]
    return (
        f"{total} incident(s) were detected, of which {summary['resolvedIncidents']} were resolved. "
        f"The overall cleanliness index stands at {overall}%."
    )
