# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Query, status

# Local application imports
from ...application.dto.incident_dto import (
    IncidentCreateRequest,
    IncidentStatusUpdateRequest,
    IncidentAssignRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.incident import (
    CreateIncidentUseCase,
    ListIncidentsUseCase,
    GetIncidentUseCase,
    GetIncidentStatsUseCase,
    UpdateIncidentStatusUseCase,
    AssignIncidentUseCase,
)
from ...core.time_utils import to_naive_utc
from ...domain.constants import IncidentType, Severity, IncidentStatus, Zone
from ...domain.exceptions import PrahariError
from ...domain.repositories.incident_repository import IncidentFilter
from ...di.container import get_container
from .access_policy import require_action
from .responses import envelope, http_error


router = APIRouter(tags=["incidents"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_incident(
    request: IncidentCreateRequest,
    current_user: UserResponse = Depends(require_action("incident:create")),
) -> dict:
    """
    Record an incident manually; it always starts in the detected state

    Args:
        request: Incident creation request
        current_user: Current authenticated user (from dependency)
    """
    container = get_container()
    create_incident_use_case = container.get(CreateIncidentUseCase)

    try:
        incident = await create_incident_use_case.execute(request)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"incident": incident}, message="Incident created successfully")


@router.get("")
async def list_incidents(
    incident_type: Optional[IncidentType] = Query(default=None, alias="type"),
    severity: Optional[Severity] = Query(default=None),
    incident_status: Optional[IncidentStatus] = Query(default=None, alias="status"),
    camera_id: Optional[str] = Query(default=None, alias="cameraId"),
    zone: Optional[Zone] = Query(default=None),
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    sort_by: str = Query(default="createdAt", alias="sortBy"),
    sort_order: str = Query(default="desc", alias="sortOrder", pattern="^(asc|desc)$"),
    current_user: UserResponse = Depends(require_action("incident:read")),
) -> dict:
    """List incidents with filters, sorting and pagination"""
    container = get_container()
    list_incidents_use_case = container.get(ListIncidentsUseCase)

    criteria = IncidentFilter(
        type=incident_type.value if incident_type else None,
        severity=severity.value if severity else None,
        status=incident_status.value if incident_status else None,
        camera_id=camera_id,
        zone=zone.value if zone else None,
        start_date=to_naive_utc(start_date) if start_date else None,
        end_date=to_naive_utc(end_date) if end_date else None,
    )
    incidents, pagination = await list_incidents_use_case.execute(
        criteria, page=page, limit=limit, sort_by=sort_by, sort_order=sort_order
    )
    return envelope({"incidents": incidents}, meta={"pagination": pagination})


@router.get("/stats")
async def get_incident_stats(
    period: str = Query(default="today", pattern="^(today|week|month)$"),
    current_user: UserResponse = Depends(require_action("incident:read")),
) -> dict:
    container = get_container()
    stats = await container.get(GetIncidentStatsUseCase).execute(period)
    return envelope(stats)


@router.get("/{incident_id}")
async def get_incident(
    incident_id: str,
    current_user: UserResponse = Depends(require_action("incident:read")),
) -> dict:
    """
    Get an incident by storage id or incident id (INC-...)
    """
    container = get_container()

    try:
        incident = await container.get(GetIncidentUseCase).execute(incident_id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"incident": incident})


@router.put("/{incident_id}/status")
async def update_incident_status(
    incident_id: str,
    request: IncidentStatusUpdateRequest,
    current_user: UserResponse = Depends(require_action("incident:update")),
) -> dict:
    """
    Move an incident to a new status

    Returns 409 when the incident is a false positive or when
    expectedVersion no longer matches the stored version.
    """
    container = get_container()
    update_use_case = container.get(UpdateIncidentStatusUseCase)

    try:
        incident = await update_use_case.execute(incident_id, request, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"incident": incident}, message="Incident updated successfully")


@router.post("/{incident_id}/assign")
async def assign_incident(
    incident_id: str,
    request: IncidentAssignRequest,
    current_user: UserResponse = Depends(require_action("incident:assign")),
) -> dict:
    container = get_container()
    assign_use_case = container.get(AssignIncidentUseCase)

    try:
        incident = await assign_use_case.execute(incident_id, request, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"incident": incident}, message="Incident assigned successfully")
