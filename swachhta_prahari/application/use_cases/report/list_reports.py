from datetime import datetime
from typing import Optional, List, Tuple

from ....domain.repositories.report_repository import ReportRepository
from ...dto.report_dto import ReportResponse
from ...dto.common_dto import PaginationMeta


class ListReportsUseCase:
    """Use case for listing generated reports, newest first"""

    def __init__(self, report_repository: ReportRepository) -> None:
        self.report_repository = report_repository

    async def execute(
        self,
        report_type: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[ReportResponse], PaginationMeta]:
        total, reports = await self.report_repository.list(
            report_type, start_date, end_date, skip=(page - 1) * limit, limit=limit
        )
        return [ReportResponse.from_domain(r) for r in reports], PaginationMeta.build(page, limit, total)
