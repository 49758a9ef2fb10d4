# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, Query, UploadFile, status

# Local application imports
from ...application.dto.camera_dto import CameraCreateRequest, CameraUpdateRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.camera import (
    CreateCameraUseCase,
    ListCamerasUseCase,
    GetCameraUseCase,
    UpdateCameraUseCase,
    GetCameraHealthUseCase,
    RestartCameraUseCase,
    UploadCameraVideoUseCase,
)
from ...domain.constants import Zone, CameraStatus
from ...domain.exceptions import PrahariError
from ...di.container import get_container
from .access_policy import require_action
from .responses import envelope, http_error


router = APIRouter(tags=["cameras"])


@router.post("/addCamera", status_code=status.HTTP_201_CREATED)
async def add_camera(
    request: CameraCreateRequest,
    current_user: UserResponse = Depends(require_action("camera:create")),
) -> dict:
    """
    Register a new camera

    Args:
        request: Camera creation request
        current_user: Current authenticated admin (from dependency)

    Returns:
        Envelope with the created camera
    """
    container = get_container()
    create_camera_use_case = container.get(CreateCameraUseCase)

    try:
        camera = await create_camera_use_case.execute(request)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"camera": camera}, message="Camera added successfully")


@router.get("")
async def list_cameras(
    zone: Optional[Zone] = Query(default=None),
    camera_status: Optional[CameraStatus] = Query(default=None, alias="status"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=100),
    current_user: UserResponse = Depends(require_action("camera:read")),
) -> dict:
    """List cameras with optional zone and status filters"""
    container = get_container()
    list_cameras_use_case = container.get(ListCamerasUseCase)

    cameras, pagination = await list_cameras_use_case.execute(
        zone=zone.value if zone else None,
        status=camera_status.value if camera_status else None,
        page=page,
        limit=limit,
    )
    return envelope({"cameras": cameras}, meta={"pagination": pagination})


@router.get("/{camera_id}")
async def get_camera(
    camera_id: str,
    current_user: UserResponse = Depends(require_action("camera:read")),
) -> dict:
    """
    Get a camera with its ten most recent incidents

    Args:
        camera_id: Camera business ID
    """
    container = get_container()
    get_camera_use_case = container.get(GetCameraUseCase)

    try:
        camera, recent_incidents = await get_camera_use_case.execute(camera_id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"camera": camera, "recentIncidents": recent_incidents})


@router.put("/{camera_id}")
async def update_camera(
    camera_id: str,
    request: CameraUpdateRequest,
    current_user: UserResponse = Depends(require_action("camera:update")),
) -> dict:
    container = get_container()
    update_camera_use_case = container.get(UpdateCameraUseCase)

    try:
        camera = await update_camera_use_case.execute(camera_id, request, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"camera": camera}, message="Camera updated successfully")


@router.get("/{camera_id}/health")
async def get_camera_health(
    camera_id: str,
    current_user: UserResponse = Depends(require_action("camera:read")),
) -> dict:
    container = get_container()

    try:
        health = await container.get(GetCameraHealthUseCase).execute(camera_id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"health": health})


@router.post("/{camera_id}/restart")
async def restart_camera(
    camera_id: str,
    current_user: UserResponse = Depends(require_action("camera:restart")),
) -> dict:
    container = get_container()

    try:
        camera = await container.get(RestartCameraUseCase).execute(camera_id, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"camera": camera}, message="Camera restart initiated")


@router.post("/{camera_id}/videos", status_code=status.HTTP_201_CREATED)
async def upload_camera_video(
    camera_id: str,
    video: Optional[UploadFile] = File(default=None),
    current_user: UserResponse = Depends(require_action("camera:upload_video")),
) -> dict:
    """
    Upload a recorded video for a camera

    The file is streamed to a temp file, pushed to remote video storage and
    its metadata appended to the camera. The temp file is always removed.
    """
    container = get_container()
    upload_use_case = container.get(UploadCameraVideoUseCase)

    try:
        uploaded = await upload_use_case.execute(camera_id, video)
    except PrahariError as exception:
        raise http_error(exception)
    finally:
        if video is not None:
            await video.close()
    return envelope({"video": uploaded}, message="Video uploaded successfully")
