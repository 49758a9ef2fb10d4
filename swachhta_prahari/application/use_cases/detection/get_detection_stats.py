# Standard library imports
from collections import defaultdict
from datetime import timedelta
from typing import Any, Dict, List

# Local application imports
from ....core.time_utils import utc_now
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ....domain.constants import IncidentStatus
from ...dto.detection_dto import DetectionStatsResponse

TIME_RANGES = {
    "24h": timedelta(days=1),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
DEFAULT_TIME_RANGE = "7d"


class GetDetectionStatsUseCase:
    """Per-day, per-type detection counts with confidence and false positive totals"""

    def __init__(self, incident_repository: IncidentRepository) -> None:
        self.incident_repository = incident_repository

    async def execute(self, time_range: str = DEFAULT_TIME_RANGE) -> DetectionStatsResponse:
        if time_range not in TIME_RANGES:
            time_range = DEFAULT_TIME_RANGE
        end = utc_now()
        start = end - TIME_RANGES[time_range]

        incidents = await self.incident_repository.find_matching(
            IncidentFilter(start_date=start, end_date=end)
        )

        # date -> type -> [count, confidence sum, false positives]
        buckets: Dict[str, Dict[str, List[float]]] = defaultdict(lambda: defaultdict(lambda: [0, 0.0, 0]))
        for incident in incidents:
            day = incident.created_at.strftime("%Y-%m-%d") if incident.created_at else "unknown"
            bucket = buckets[day][incident.type]
            bucket[0] += 1
            bucket[1] += incident.ai_detection.confidence
            if incident.status == IncidentStatus.FALSE_POSITIVE.value:
                bucket[2] += 1

        daily: List[Dict[str, Any]] = []
        for day in sorted(buckets):
            detections = [
                {
                    "type": incident_type,
                    "count": count,
                    "avgConfidence": round(confidence_sum / count, 4),
                    "falsePositives": false_positives,
                }
                for incident_type, (count, confidence_sum, false_positives) in sorted(buckets[day].items())
            ]
            daily.append({
                "date": day,
                "detections": detections,
                "totalDetections": sum(d["count"] for d in detections),
                "totalFalsePositives": sum(d["falsePositives"] for d in detections),
            })

        total = sum(day["totalDetections"] for day in daily)
        false_positives = sum(day["totalFalsePositives"] for day in daily)
        accuracy = ((total - false_positives) / total) * 100 if total else 100.0

        return DetectionStatsResponse(
            time_range=time_range,
            start_date=start,
            end_date=end,
            daily=daily,
            summary={
                "totalDetections": total,
                "totalFalsePositives": false_positives,
                "accuracy": round(accuracy, 2),
            },
        )
