# Standard library imports
from collections import defaultdict
from typing import Dict, Iterable

# Local application imports
from ..constants.enums import Zone
from ..models.incident import Incident
from .severity import severity_to_priority

CLEAN_ZONE_SCORE = 95
MIN_ZONE_SCORE = 60


def zone_cleanliness(incident_count: int, average_severity: float) -> int:
    """Score a zone from its incident count and mean severity weight (1-4)."""
    if incident_count <= 0:
        return CLEAN_ZONE_SCORE
    impact = incident_count * average_severity / 10
    return max(MIN_ZONE_SCORE, round(100 - impact))


def cleanliness_index(incidents: Iterable[Incident]) -> Dict[str, object]:
    """
    Compute the cleanliness index for every zone plus the overall mean.

    Returns:
        {"overall": float, "byZone": {zone: int}}
    """
    weights: Dict[str, list] = defaultdict(list)
    for incident in incidents:
        if incident.location.zone:
            weights[incident.location.zone].append(severity_to_priority(incident.severity))

    by_zone: Dict[str, int] = {}
    for zone in Zone:
        zone_weights = weights.get(zone.value, [])
        average = sum(zone_weights) / len(zone_weights) if zone_weights else 0.0
        by_zone[zone.value] = zone_cleanliness(len(zone_weights), average)

    overall = round(sum(by_zone.values()) / len(by_zone), 2)
    return {"overall": overall, "byZone": by_zone}
