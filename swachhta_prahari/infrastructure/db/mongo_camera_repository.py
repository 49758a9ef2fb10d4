# Standard library imports
from dataclasses import asdict
from datetime import datetime
from typing import Optional, List, Tuple, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.time_utils import utc_now
from ...domain.repositories.camera_repository import CameraRepository
from ...domain.models.camera import (
    Camera,
    CameraLocation,
    Coordinates,
    AIConfig,
    CameraStatistics,
    CameraMaintenance,
    UploadedVideo,
)
from ...domain.constants import CameraFields
from ...domain.exceptions import ConflictError
from .mongo_connection import get_camera_collection


def _camera_id_query(camera_id: str) -> Dict[str, Any]:
    # Stored uppercase; callers may pass any case
    return {CameraFields.CAMERA_ID: camera_id.strip().upper()}


class MongoCameraRepository(CameraRepository):
    """MongoDB implementation of CameraRepository"""

    def __init__(self, camera_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.camera_collection = camera_collection if camera_collection is not None else get_camera_collection()

    async def find_by_camera_id(self, camera_id: str) -> Optional[Camera]:
        """
        Find camera by its business ID

        Args:
            camera_id: The camera ID (e.g. "CAM-001")

        Returns:
            Camera domain model if found, None otherwise
        """
        if not camera_id:
            return None

        try:
            document = await self.camera_collection.find_one(_camera_id_query(camera_id))
            if document is None:
                return None
            return self._document_to_camera(document)
        except Exception as e:
            raise RuntimeError(f"Error finding camera by ID: {str(e)}")

    async def create(self, camera: Camera) -> Camera:
        if not camera:
            raise ValueError("Camera cannot be None")

        try:
            camera_dict = self._camera_to_dict(camera)
            now = utc_now()
            camera_dict[CameraFields.CREATED_AT] = now
            camera_dict[CameraFields.UPDATED_AT] = now

            result = await self.camera_collection.insert_one(camera_dict)
            new_document = await self.camera_collection.find_one({CameraFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("Camera was created but could not be retrieved")
            return self._document_to_camera(new_document)
        except DuplicateKeyError:
            raise ConflictError("Camera ID already exists")
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving camera: {str(e)}")

    async def list(
        self, zone: Optional[str], status: Optional[str], skip: int, limit: int
    ) -> Tuple[int, List[Camera]]:
        query: Dict[str, Any] = {}
        if zone:
            query[CameraFields.LOCATION_ZONE] = zone
        if status:
            query[CameraFields.STATUS] = status

        try:
            total = await self.camera_collection.count_documents(query)
            cursor = (
                self.camera_collection.find(query)
                .sort(CameraFields.CAMERA_ID, ASCENDING)
                .skip(max(0, int(skip)))
                .limit(max(1, int(limit)))
            )
            cameras = []
            async for document in cursor:
                cameras.append(self._document_to_camera(document))
            return total, cameras
        except Exception as e:
            raise RuntimeError(f"Error listing cameras: {str(e)}")

    async def update_fields(self, camera_id: str, fields: Dict[str, Any]) -> Optional[Camera]:
        if not camera_id:
            return None

        update = dict(fields)
        update[CameraFields.UPDATED_AT] = utc_now()
        try:
            document = await self.camera_collection.find_one_and_update(
                _camera_id_query(camera_id),
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
            if document is None:
                return None
            return self._document_to_camera(document)
        except Exception as e:
            raise RuntimeError(f"Error updating camera: {str(e)}")

    async def record_detection(self, camera_id: str, detected_at: datetime) -> None:
        try:
            await self.camera_collection.update_one(
                _camera_id_query(camera_id),
                {
                    "$inc": {CameraFields.STATS_TOTAL_DETECTIONS: 1},
                    "$set": {CameraFields.STATS_LAST_DETECTION: detected_at},
                },
            )
        except Exception as e:
            raise RuntimeError(f"Error recording camera detection: {str(e)}")

    async def add_uploaded_video(self, camera_id: str, video: UploadedVideo) -> Optional[Camera]:
        try:
            document = await self.camera_collection.find_one_and_update(
                _camera_id_query(camera_id),
                {
                    "$push": {CameraFields.UPLOADED_VIDEOS: asdict(video)},
                    "$set": {CameraFields.UPDATED_AT: utc_now()},
                },
                return_document=ReturnDocument.AFTER,
            )
            if document is None:
                return None
            return self._document_to_camera(document)
        except Exception as e:
            raise RuntimeError(f"Error saving uploaded video metadata: {str(e)}")

    async def count_by_status(self) -> Dict[str, int]:
        try:
            counts: Dict[str, int] = {}
            cursor = self.camera_collection.aggregate([
                {"$group": {"_id": f"${CameraFields.STATUS}", "count": {"$sum": 1}}}
            ])
            async for row in cursor:
                counts[row["_id"]] = row["count"]
            return counts
        except Exception as e:
            raise RuntimeError(f"Error counting cameras by status: {str(e)}")

    async def update_ai_config(self, camera_id: Optional[str], config: Dict[str, Any]) -> int:
        update = {f"{CameraFields.AI_CONFIG}.{key}": value for key, value in config.items()}
        update[CameraFields.UPDATED_AT] = utc_now()
        query = _camera_id_query(camera_id) if camera_id else {}
        try:
            result = await self.camera_collection.update_many(query, {"$set": update})
            return result.modified_count
        except Exception as e:
            raise RuntimeError(f"Error updating AI config: {str(e)}")

    def _document_to_camera(self, document: Dict[str, Any]) -> Camera:
        """
        Convert MongoDB document to Camera domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Camera domain model
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        location = document.get(CameraFields.LOCATION) or {}
        coordinates = location.get("coordinates")
        ai_config = document.get(CameraFields.AI_CONFIG) or {}
        statistics = document.get(CameraFields.STATISTICS) or {}
        maintenance = document.get(CameraFields.MAINTENANCE) or {}

        return Camera(
            id=str(document[CameraFields.MONGO_ID]) if CameraFields.MONGO_ID in document else None,
            camera_id=document.get(CameraFields.CAMERA_ID, ""),
            name=document.get(CameraFields.NAME, ""),
            location=CameraLocation(
                zone=location.get("zone", ""),
                position=location.get("position", ""),
                coordinates=Coordinates(**coordinates) if coordinates else None,
            ),
            rtsp_url=document.get(CameraFields.RTSP_URL, ""),
            status=document.get(CameraFields.STATUS, "offline"),
            specifications=document.get(CameraFields.SPECIFICATIONS) or {},
            ai_config=AIConfig(**ai_config),
            statistics=CameraStatistics(**statistics),
            maintenance=CameraMaintenance(**maintenance),
            uploaded_videos=[UploadedVideo(**v) for v in document.get(CameraFields.UPLOADED_VIDEOS) or []],
            created_at=document.get(CameraFields.CREATED_AT),
            updated_at=document.get(CameraFields.UPDATED_AT),
        )

    def _camera_to_dict(self, camera: Camera) -> Dict[str, Any]:
        """Convert Camera domain model to MongoDB document (without _id)"""
        return {
            CameraFields.CAMERA_ID: camera.camera_id,
            CameraFields.NAME: camera.name.strip(),
            CameraFields.LOCATION: asdict(camera.location),
            CameraFields.RTSP_URL: camera.rtsp_url,
            CameraFields.STATUS: camera.status,
            CameraFields.SPECIFICATIONS: camera.specifications,
            CameraFields.AI_CONFIG: asdict(camera.ai_config),
            CameraFields.STATISTICS: asdict(camera.statistics),
            CameraFields.MAINTENANCE: asdict(camera.maintenance),
            CameraFields.UPLOADED_VIDEOS: [asdict(v) for v in camera.uploaded_videos],
        }
