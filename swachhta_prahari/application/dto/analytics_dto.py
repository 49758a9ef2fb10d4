from datetime import datetime
from typing import Dict, List, Any

from pydantic import Field

from .base import ApiModel
from .incident_dto import IncidentResponse


class SystemHealth(ApiModel):
    ai_processing_engine: str = "online"
    database_connection: str = "online"
    camera_network: str
    last_update: datetime


class DashboardResponse(ApiModel):
    incident_summary: Dict[str, int]
    camera_status: Dict[str, int]
    critical_incidents: List[IncidentResponse] = Field(default_factory=list)
    system_health: SystemHealth


class AnalyticsOverviewResponse(ApiModel):
    range: str
    start_date: datetime
    end_date: datetime
    system_overview: Dict[str, Any]
    incident_trends: List[Dict[str, Any]]
    performance_metrics: Dict[str, Any]
    cleanliness_index: Dict[str, Any]


class LiveData(ApiModel):
    timestamp: datetime
    system_status: str
    active_cameras: int
    total_cameras: int
    pending_incidents: int
