from typing import TYPE_CHECKING
from ...domain.repositories import CameraRepository, IncidentRepository, SequenceRepository
from ...infrastructure.notifications import IncidentBroadcaster
from ...application.use_cases.detection import (
    ProcessDetectionUseCase,
    GetModelStatusUseCase,
    GetDetectionStatsUseCase,
    UpdateAIConfigUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DetectionProvider:
    """Detection webhook and AI configuration use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ProcessDetectionUseCase,
            lambda: ProcessDetectionUseCase(
                incident_repository=container.get(IncidentRepository),
                camera_repository=container.get(CameraRepository),
                sequence_repository=container.get(SequenceRepository),
                broadcaster=container.get(IncidentBroadcaster),
            )
        )
        container.register_factory(
            GetModelStatusUseCase,
            lambda: GetModelStatusUseCase(incident_repository=container.get(IncidentRepository))
        )
        container.register_factory(
            GetDetectionStatsUseCase,
            lambda: GetDetectionStatsUseCase(incident_repository=container.get(IncidentRepository))
        )
        container.register_factory(
            UpdateAIConfigUseCase,
            lambda: UpdateAIConfigUseCase(camera_repository=container.get(CameraRepository))
        )
