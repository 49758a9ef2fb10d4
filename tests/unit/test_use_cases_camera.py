"""
Unit tests for camera use cases.
"""
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from swachhta_prahari.application.dto.camera_dto import CameraCreateRequest, CameraUpdateRequest
from swachhta_prahari.application.use_cases.camera import (
    CreateCameraUseCase,
    UpdateCameraUseCase,
    GetCameraHealthUseCase,
    UploadCameraVideoUseCase,
)
from swachhta_prahari.core.time_utils import utc_now
from swachhta_prahari.domain.constants import CameraFields
from swachhta_prahari.domain.exceptions import (
    NotFoundError,
    ValidationFailedError,
    PayloadTooLargeError,
    UpstreamServiceError,
)
from swachhta_prahari.domain.models.camera import CameraStatistics, UploadedVideo

from tests.factories import make_camera


class FakeUpload:
    def __init__(self, filename="clip.mp4", content_type="video/mp4", data=b"x" * 10):
        self.filename = filename
        self.content_type = content_type
        self._data = data

    async def read(self, size=-1):
        chunk, self._data = self._data[:size], self._data[size:]
        return chunk


class TestCreateCameraUseCase:
    """Tests for CreateCameraUseCase"""

    @pytest.mark.asyncio
    async def test_duplicate_rejected(self):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera()
        request = CameraCreateRequest(
            camera_id="cam-001", name="Gate", location={"zone": "A"}, rtsp_url="rtsp://x"
        )
        with pytest.raises(ValidationFailedError, match="Camera with this ID already exists"):
            await CreateCameraUseCase(repo).execute(request)

    @pytest.mark.asyncio
    async def test_id_uppercased_and_ai_enabled(self):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = None
        repo.create.side_effect = lambda camera: camera
        request = CameraCreateRequest(
            camera_id="cam-009", name="Drain Cam", location={"zone": "C"}, rtsp_url="rtsp://x"
        )

        result = await CreateCameraUseCase(repo).execute(request)

        assert result.camera_id == "CAM-009"
        assert result.ai_config.enabled is True
        repo.find_by_camera_id.assert_awaited_once_with("CAM-009")


class TestUpdateCameraUseCase:
    """Tests for UpdateCameraUseCase"""

    @pytest.mark.asyncio
    async def test_status_change_is_broadcast(self, broadcaster):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera(status="online")
        repo.update_fields.return_value = make_camera(status="maintenance")

        await UpdateCameraUseCase(repo, broadcaster).execute(
            "CAM-001", CameraUpdateRequest(status="maintenance"), "usr-admin"
        )

        assert repo.update_fields.call_args.args[1] == {CameraFields.STATUS: "maintenance"}
        broadcaster.broadcast_camera_status.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rename_is_not_broadcast(self, broadcaster):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera(status="online")
        repo.update_fields.return_value = make_camera(status="online", name="Renamed")

        await UpdateCameraUseCase(repo, broadcaster).execute(
            "CAM-001", CameraUpdateRequest(name="Renamed"), "usr-admin"
        )

        broadcaster.broadcast_camera_status.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_update_rejected(self, broadcaster):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera()
        with pytest.raises(ValidationFailedError):
            await UpdateCameraUseCase(repo, broadcaster).execute("CAM-001", CameraUpdateRequest(), "usr-admin")


class TestGetCameraHealthUseCase:
    @pytest.mark.asyncio
    async def test_online_and_recent_is_healthy(self):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera(
            status="online", statistics=CameraStatistics(last_detection=utc_now() - timedelta(hours=1))
        )
        health = await GetCameraHealthUseCase(repo).execute("CAM-001")
        assert health.health == "healthy"

    @pytest.mark.asyncio
    async def test_silent_camera_is_degraded(self):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera(
            status="online", statistics=CameraStatistics(last_detection=utc_now() - timedelta(days=2))
        )
        health = await GetCameraHealthUseCase(repo).execute("CAM-001")
        assert health.health == "degraded"

    @pytest.mark.asyncio
    async def test_offline_reports_status(self):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera(status="offline")
        health = await GetCameraHealthUseCase(repo).execute("CAM-001")
        assert health.health == "offline"


@pytest.fixture
def upload_settings(tmp_path):
    settings = MagicMock()
    settings.upload_max_mb = 1
    settings.upload_tmp_dir = str(tmp_path)
    with patch(
        "swachhta_prahari.application.use_cases.camera.upload_camera_video.get_settings",
        return_value=settings,
    ):
        yield tmp_path


class TestUploadCameraVideoUseCase:
    """Tests for UploadCameraVideoUseCase"""

    def _storage(self):
        storage = AsyncMock()
        storage.folder = "upsida/cameras"
        storage.upload_video.return_value = UploadedVideo(url="https://cdn/clip.mp4", public_id="clip")
        return storage

    @pytest.mark.asyncio
    async def test_upload_pipeline_cleans_temp_file(self, upload_settings):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera()
        repo.add_uploaded_video.return_value = make_camera()
        storage = self._storage()

        result = await UploadCameraVideoUseCase(repo, storage).execute("CAM-001", FakeUpload())

        assert result.public_id == "clip"
        assert storage.upload_video.call_args.kwargs["folder"] == "upsida/cameras/CAM-001"
        assert list(upload_settings.iterdir()) == []

    @pytest.mark.asyncio
    async def test_missing_camera(self, upload_settings):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = None
        with pytest.raises(NotFoundError):
            await UploadCameraVideoUseCase(repo, self._storage()).execute("CAM-404", FakeUpload())

    @pytest.mark.asyncio
    async def test_no_file(self, upload_settings):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera()
        with pytest.raises(ValidationFailedError, match="No video file uploaded"):
            await UploadCameraVideoUseCase(repo, self._storage()).execute("CAM-001", None)

    @pytest.mark.asyncio
    async def test_non_video_rejected(self, upload_settings):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera()
        upload = FakeUpload(filename="notes.txt", content_type="text/plain")
        with pytest.raises(ValidationFailedError, match="Only video files are allowed"):
            await UploadCameraVideoUseCase(repo, self._storage()).execute("CAM-001", upload)

    @pytest.mark.asyncio
    async def test_too_large(self, upload_settings):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera()
        upload = FakeUpload(data=b"x" * (1024 * 1024 + 1))
        with pytest.raises(PayloadTooLargeError):
            await UploadCameraVideoUseCase(repo, self._storage()).execute("CAM-001", upload)
        assert list(upload_settings.iterdir()) == []

    @pytest.mark.asyncio
    async def test_remote_failure_still_cleans_up(self, upload_settings):
        repo = AsyncMock()
        repo.find_by_camera_id.return_value = make_camera()
        storage = self._storage()
        storage.upload_video.side_effect = UpstreamServiceError("storage unavailable")

        with pytest.raises(UpstreamServiceError):
            await UploadCameraVideoUseCase(repo, storage).execute("CAM-001", FakeUpload())

        assert list(upload_settings.iterdir()) == []
        repo.add_uploaded_video.assert_not_awaited()
