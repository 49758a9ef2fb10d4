# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import FileResponse

# Local application imports
from ...application.dto.report_dto import ReportGenerateRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.report import (
    GenerateReportUseCase,
    ListReportsUseCase,
    DownloadReportUseCase,
)
from ...core.time_utils import to_naive_utc
from ...domain.constants import ReportType
from ...domain.exceptions import PrahariError
from ...di.container import get_container
from .access_policy import require_action
from .responses import envelope, http_error


router = APIRouter(tags=["reports"])


@router.post("/generate", status_code=status.HTTP_201_CREATED)
async def generate_report(
    request: ReportGenerateRequest,
    current_user: UserResponse = Depends(require_action("report:generate")),
) -> dict:
    """
    Generate a report for the requested period

    The file is written and, when recipients are given, mailed before the
    response is returned.
    """
    container = get_container()
    generate_report_use_case = container.get(GenerateReportUseCase)

    try:
        report = await generate_report_use_case.execute(request, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"report": report}, message="Report generated successfully")


@router.get("")
async def list_reports(
    report_type: Optional[ReportType] = Query(default=None, alias="type"),
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    current_user: UserResponse = Depends(require_action("report:read")),
) -> dict:
    container = get_container()
    reports, pagination = await container.get(ListReportsUseCase).execute(
        report_type=report_type.value if report_type else None,
        start_date=to_naive_utc(start_date) if start_date else None,
        end_date=to_naive_utc(end_date) if end_date else None,
        page=page,
        limit=limit,
    )
    return envelope({"reports": reports}, meta={"pagination": pagination})


@router.get("/{report_id}/download")
async def download_report(
    report_id: str,
    current_user: UserResponse = Depends(require_action("report:read")),
):
    container = get_container()

    try:
        download = await container.get(DownloadReportUseCase).execute(report_id)
    except PrahariError as exception:
        raise http_error(exception)
    return FileResponse(
        path=download.path,
        filename=download.filename,
        media_type=download.media_type,
    )
