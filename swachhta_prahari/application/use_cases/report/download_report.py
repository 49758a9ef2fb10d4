import os

from ....domain.repositories.report_repository import ReportRepository
from ....domain.exceptions import NotFoundError
from ...dto.report_dto import ReportDownload

_MEDIA_TYPES = {
    "pdf": "application/pdf",
    "excel": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "csv": "text/csv",
    "json": "application/json",
}


class DownloadReportUseCase:
    """Resolve a stored report to the file that should be streamed back"""

    def __init__(self, report_repository: ReportRepository) -> None:
        self.report_repository = report_repository

    async def execute(self, report_ref: str) -> ReportDownload:
        report = await self.report_repository.find_by_id(report_ref)
        if report is None or report.file_info is None or not report.file_info.path:
            raise NotFoundError("Report file not found")
        if not os.path.isfile(report.file_info.path):
            raise NotFoundError("Report file not found")
        return ReportDownload(
            path=report.file_info.path,
            filename=report.file_info.filename,
            media_type=_MEDIA_TYPES.get(report.file_info.format, "application/octet-stream"),
        )
