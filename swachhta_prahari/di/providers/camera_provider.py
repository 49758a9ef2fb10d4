from typing import TYPE_CHECKING
from ...domain.repositories import CameraRepository, IncidentRepository
from ...infrastructure.notifications import IncidentBroadcaster
from ...infrastructure.external import VideoStorageClient
from ...application.use_cases.camera import (
    CreateCameraUseCase,
    ListCamerasUseCase,
    GetCameraUseCase,
    UpdateCameraUseCase,
    GetCameraHealthUseCase,
    RestartCameraUseCase,
    UploadCameraVideoUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CameraProvider:
    """Camera use case provider - registers all camera-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateCameraUseCase,
            lambda: CreateCameraUseCase(camera_repository=container.get(CameraRepository))
        )
        container.register_factory(
            ListCamerasUseCase,
            lambda: ListCamerasUseCase(camera_repository=container.get(CameraRepository))
        )
        container.register_factory(
            GetCameraUseCase,
            lambda: GetCameraUseCase(
                camera_repository=container.get(CameraRepository),
                incident_repository=container.get(IncidentRepository),
            )
        )
        container.register_factory(
            UpdateCameraUseCase,
            lambda: UpdateCameraUseCase(
                camera_repository=container.get(CameraRepository),
                broadcaster=container.get(IncidentBroadcaster),
            )
        )
        container.register_factory(
            GetCameraHealthUseCase,
            lambda: GetCameraHealthUseCase(camera_repository=container.get(CameraRepository))
        )
        container.register_factory(
            RestartCameraUseCase,
            lambda: RestartCameraUseCase(
                camera_repository=container.get(CameraRepository),
                broadcaster=container.get(IncidentBroadcaster),
            )
        )
        container.register_factory(
            UploadCameraVideoUseCase,
            lambda: UploadCameraVideoUseCase(
                camera_repository=container.get(CameraRepository),
                video_storage=container.get(VideoStorageClient),
            )
        )
