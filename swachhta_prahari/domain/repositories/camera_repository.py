from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List, Tuple, Dict, Any
from ..models.camera import Camera, UploadedVideo


class CameraRepository(ABC):
    """Repository interface - defines contract for camera data access"""

    @abstractmethod
    async def find_by_camera_id(self, camera_id: str) -> Optional[Camera]:
        """Find camera by its business ID (case-insensitive)"""
        pass

    @abstractmethod
    async def create(self, camera: Camera) -> Camera:
        """Insert a new camera"""
        pass

    @abstractmethod
    async def list(
        self, zone: Optional[str], status: Optional[str], skip: int, limit: int
    ) -> Tuple[int, List[Camera]]:
        """List cameras matching filters, returning (total, items)"""
        pass

    @abstractmethod
    async def update_fields(self, camera_id: str, fields: Dict[str, Any]) -> Optional[Camera]:
        """Apply a partial update (dotted paths allowed) and return the updated camera"""
        pass

    @abstractmethod
    async def record_detection(self, camera_id: str, detected_at: datetime) -> None:
        """Atomically increment the detection counter and set the last detection time"""
        pass

    @abstractmethod
    async def add_uploaded_video(self, camera_id: str, video: UploadedVideo) -> Optional[Camera]:
        """Append uploaded video metadata"""
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[str, int]:
        """Return camera counts keyed by status"""
        pass

    @abstractmethod
    async def update_ai_config(self, camera_id: Optional[str], config: Dict[str, Any]) -> int:
        """Update AI config for one camera, or all cameras when camera_id is None"""
        pass
