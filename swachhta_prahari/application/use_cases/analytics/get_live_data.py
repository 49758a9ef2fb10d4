from ....core.time_utils import utc_now
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ....domain.constants import CameraStatus, ACTIVE_INCIDENT_STATUSES
from ...dto.analytics_dto import LiveData


class GetLiveDataUseCase:
    """Snapshot pushed to realtime clients that ask for live data"""

    def __init__(self, incident_repository: IncidentRepository, camera_repository: CameraRepository) -> None:
        self.incident_repository = incident_repository
        self.camera_repository = camera_repository

    async def execute(self) -> LiveData:
        camera_status = await self.camera_repository.count_by_status()
        pending = await self.incident_repository.count(
            IncidentFilter(status=[s.value for s in ACTIVE_INCIDENT_STATUSES])
        )
        active = camera_status.get(CameraStatus.ONLINE.value, 0)
        total = sum(camera_status.values())
        return LiveData(
            timestamp=utc_now(),
            system_status="operational" if total == 0 or active > 0 else "degraded",
            active_cameras=active,
            total_cameras=total,
            pending_incidents=pending,
        )
