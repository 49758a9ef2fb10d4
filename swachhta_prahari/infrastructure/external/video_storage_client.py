# Standard library imports
import logging
import mimetypes
import os
from typing import Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...core.time_utils import utc_now
from ...domain.exceptions import UpstreamServiceError
from ...domain.models.camera import UploadedVideo
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class VideoStorageClient:
    """
    HTTP client for the remote video storage service.

    Uploads a local file as multipart form data and returns the stored
    video's metadata. The service is expected to answer with JSON carrying
    ``url`` (or ``secure_url``), ``public_id`` and optional ``format``,
    ``duration`` and ``bytes``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        folder: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url if base_url is not None else settings.video_storage_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.video_storage_api_key
        self.folder = folder if folder is not None else settings.video_storage_folder
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client if self._http_client is not None else get_shared_http_client()

    async def upload_video(self, file_path: str, folder: Optional[str] = None) -> UploadedVideo:
        """
        Upload a video file.

        Args:
            file_path: Path of the temporary file on local disk
            folder: Remote folder; defaults to the configured folder

        Returns:
            UploadedVideo metadata

        Raises:
            UpstreamServiceError: If storage is not configured or the upload fails
        """
        if not self.base_url:
            raise UpstreamServiceError("Video storage is not configured")

        filename = os.path.basename(file_path)
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

        logger.info(f"Uploading {filename} to video storage folder {folder or self.folder}")
        try:
            with open(file_path, "rb") as fh:
                response = await self.http_client.post(
                    f"{self.base_url}/upload",
                    data={"folder": folder or self.folder, "resource_type": "video"},
                    files={"file": (filename, fh, content_type)},
                    headers=headers,
                )
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException:
            logger.error(f"Timeout uploading {filename} to video storage")
            raise UpstreamServiceError("Video upload timed out")
        except httpx.HTTPStatusError as e:
            logger.error(f"Video storage returned HTTP {e.response.status_code} for {filename}")
            raise UpstreamServiceError(f"Upload failed: HTTP {e.response.status_code}")
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Video upload failed for {filename}: {e}")
            raise UpstreamServiceError(f"Upload failed: {str(e)}")

        url = body.get("secure_url") or body.get("url")
        if not url:
            raise UpstreamServiceError("Upload failed: storage response had no URL")

        return UploadedVideo(
            url=url,
            public_id=body.get("public_id") or filename,
            format=body.get("format"),
            duration=body.get("duration"),
            bytes=body.get("bytes"),
            uploaded_at=utc_now(),
        )
