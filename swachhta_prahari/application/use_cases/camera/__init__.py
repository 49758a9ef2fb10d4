from .create_camera import CreateCameraUseCase
from .list_cameras import ListCamerasUseCase
from .get_camera import GetCameraUseCase
from .update_camera import UpdateCameraUseCase
from .get_camera_health import GetCameraHealthUseCase
from .restart_camera import RestartCameraUseCase
from .upload_camera_video import UploadCameraVideoUseCase

__all__ = [
    "CreateCameraUseCase",
    "ListCamerasUseCase",
    "GetCameraUseCase",
    "UpdateCameraUseCase",
    "GetCameraHealthUseCase",
    "RestartCameraUseCase",
    "UploadCameraVideoUseCase",
]
