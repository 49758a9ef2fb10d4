from typing import TYPE_CHECKING
from ...domain.repositories import (
    CameraRepository,
    IncidentRepository,
    SequenceRepository,
    UserRepository,
)
from ...infrastructure.notifications import IncidentBroadcaster
from ...application.use_cases.incident import (
    CreateIncidentUseCase,
    ListIncidentsUseCase,
    GetIncidentUseCase,
    GetIncidentStatsUseCase,
    UpdateIncidentStatusUseCase,
    AssignIncidentUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class IncidentProvider:
    """Incident use case provider - registers the incident lifecycle use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateIncidentUseCase,
            lambda: CreateIncidentUseCase(
                incident_repository=container.get(IncidentRepository),
                camera_repository=container.get(CameraRepository),
                sequence_repository=container.get(SequenceRepository),
                broadcaster=container.get(IncidentBroadcaster),
            )
        )
        container.register_factory(
            ListIncidentsUseCase,
            lambda: ListIncidentsUseCase(incident_repository=container.get(IncidentRepository))
        )
        container.register_factory(
            GetIncidentUseCase,
            lambda: GetIncidentUseCase(incident_repository=container.get(IncidentRepository))
        )
        container.register_factory(
            GetIncidentStatsUseCase,
            lambda: GetIncidentStatsUseCase(incident_repository=container.get(IncidentRepository))
        )
        container.register_factory(
            UpdateIncidentStatusUseCase,
            lambda: UpdateIncidentStatusUseCase(
                incident_repository=container.get(IncidentRepository),
                broadcaster=container.get(IncidentBroadcaster),
            )
        )
        container.register_factory(
            AssignIncidentUseCase,
            lambda: AssignIncidentUseCase(
                incident_repository=container.get(IncidentRepository),
                user_repository=container.get(UserRepository),
                broadcaster=container.get(IncidentBroadcaster),
            )
        )
