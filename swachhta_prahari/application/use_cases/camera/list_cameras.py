from typing import Optional, List, Tuple

from ....domain.repositories.camera_repository import CameraRepository
from ...dto.camera_dto import CameraResponse
from ...dto.common_dto import PaginationMeta


class ListCamerasUseCase:
    """Use case for listing cameras with zone/status filters"""

    def __init__(self, camera_repository: CameraRepository) -> None:
        self.camera_repository = camera_repository

    async def execute(
        self,
        zone: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        limit: int = 50,
    ) -> Tuple[List[CameraResponse], PaginationMeta]:
        total, cameras = await self.camera_repository.list(
            zone=zone, status=status, skip=(page - 1) * limit, limit=limit
        )
        return (
            [CameraResponse.from_domain(camera) for camera in cameras],
            PaginationMeta.build(page, limit, total),
        )
