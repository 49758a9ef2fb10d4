# Standard library imports
from collections import Counter

# Local application imports
from ....core.time_utils import utc_now, period_bounds
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ...dto.incident_dto import IncidentStatsResponse

STATS_PERIODS = ("today", "week", "month")


class GetIncidentStatsUseCase:
    """Incident totals by type, severity and status for a named period"""

    def __init__(self, incident_repository: IncidentRepository) -> None:
        self.incident_repository = incident_repository

    async def execute(self, period: str = "today") -> IncidentStatsResponse:
        if period not in STATS_PERIODS:
            period = "today"
        start, end = period_bounds(period, utc_now())

        incidents = await self.incident_repository.find_matching(
            IncidentFilter(start_date=start, end_date=end)
        )

        response_times = [
            minutes for minutes in (i.response_time_minutes for i in incidents) if minutes is not None
        ]
        average = sum(response_times) / len(response_times) if response_times else 0.0

        return IncidentStatsResponse(
            period=period,
            start_date=start,
            end_date=end,
            total=len(incidents),
            by_type=dict(Counter(i.type for i in incidents)),
            by_severity=dict(Counter(i.severity for i in incidents)),
            by_status=dict(Counter(i.status for i in incidents)),
            average_response_minutes=round(average),
        )
