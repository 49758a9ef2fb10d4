from .get_dashboard import GetDashboardUseCase
from .get_analytics_overview import GetAnalyticsOverviewUseCase
from .get_live_data import GetLiveDataUseCase

__all__ = [
    "GetDashboardUseCase",
    "GetAnalyticsOverviewUseCase",
    "GetLiveDataUseCase",
]
