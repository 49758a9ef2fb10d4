from typing import TYPE_CHECKING
from ...domain.repositories import CameraRepository, IncidentRepository
from ...application.use_cases.analytics import (
    GetDashboardUseCase,
    GetAnalyticsOverviewUseCase,
    GetLiveDataUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AnalyticsProvider:
    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (GetDashboardUseCase, GetAnalyticsOverviewUseCase, GetLiveDataUseCase):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    incident_repository=container.get(IncidentRepository),
                    camera_repository=container.get(CameraRepository),
                )
            )
