from .video_storage_client import VideoStorageClient
from .email_service import EmailService

__all__ = ["VideoStorageClient", "EmailService"]
