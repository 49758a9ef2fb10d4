from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List, Tuple

from ..models.report import Report, DeliveryStatus


class ReportRepository(ABC):
    """Repository interface - defines contract for report data access"""

    @abstractmethod
    async def create(self, report: Report) -> Report:
        pass

    @abstractmethod
    async def find_by_id(self, report_ref: str) -> Optional[Report]:
        """Find report by storage id or by report id"""
        pass

    @abstractmethod
    async def list(
        self,
        report_type: Optional[str],
        start_date: Optional[datetime],
        end_date: Optional[datetime],
        skip: int,
        limit: int,
    ) -> Tuple[int, List[Report]]:
        pass

    @abstractmethod
    async def update_delivery_status(self, report_id: str, status: DeliveryStatus) -> None:
        pass
