# Standard library imports
import logging
import uuid
from pathlib import Path
from typing import Any, Optional

# Local application imports
from ....core.config import get_settings
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.exceptions import NotFoundError, ValidationFailedError, PayloadTooLargeError
from ....infrastructure.external.video_storage_client import VideoStorageClient
from ...dto.camera_dto import UploadedVideoResponse

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".mp4", ".webm", ".avi", ".mov", ".mkv"}
_CHUNK_SIZE = 1024 * 1024


def _remove_quietly(path: Optional[Path]) -> None:
    if path is None:
        return
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not remove temp upload {path}: {e}")


class UploadCameraVideoUseCase:
    """
    Upload a recorded video for a camera.

    Pipeline: stream to a temp file, push to remote video storage, append
    the returned metadata to the camera, remove the temp file. The temp file
    is removed on every path, including failures.
    """

    def __init__(self, camera_repository: CameraRepository, video_storage: VideoStorageClient) -> None:
        self.camera_repository = camera_repository
        self.video_storage = video_storage

    async def execute(self, camera_id: str, upload: Optional[Any]) -> UploadedVideoResponse:
        """
        Args:
            camera_id: Camera business ID
            upload: Uploaded file exposing ``filename``, ``content_type`` and async ``read``

        Raises:
            NotFoundError: Camera does not exist
            ValidationFailedError: No file, or the file is not a video
            PayloadTooLargeError: File exceeds UPLOAD_MAX_MB
            UpstreamServiceError: Remote storage rejected the upload
        """
        camera = await self.camera_repository.find_by_camera_id(camera_id)
        if camera is None:
            raise NotFoundError("Camera not found")

        if upload is None or not getattr(upload, "filename", None):
            raise ValidationFailedError("No video file uploaded")

        content_type = getattr(upload, "content_type", None) or ""
        extension = Path(upload.filename).suffix.lower()
        if not content_type.startswith("video/") and extension not in ALLOWED_EXTENSIONS:
            raise ValidationFailedError("Only video files are allowed")

        settings = get_settings()
        max_bytes = settings.upload_max_mb * 1024 * 1024
        tmp_dir = Path(settings.upload_tmp_dir)
        tmp_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = tmp_dir / f"{uuid.uuid4().hex}{extension or '.mp4'}"

        try:
            size = 0
            with open(tmp_path, "wb") as fh:
                while True:
                    chunk = await upload.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > max_bytes:
                        raise PayloadTooLargeError(f"File too large. Max {settings.upload_max_mb} MB.")
                    fh.write(chunk)

            video = await self.video_storage.upload_video(
                str(tmp_path), folder=f"{self.video_storage.folder}/{camera.camera_id}"
            )
            updated = await self.camera_repository.add_uploaded_video(camera.camera_id, video)
            if updated is None:
                raise NotFoundError("Camera not found")

            logger.info(f"Video uploaded for camera {camera.camera_id}: {video.public_id} ({size} bytes)")
            return UploadedVideoResponse.from_domain(video)
        finally:
            _remove_quietly(tmp_path)
