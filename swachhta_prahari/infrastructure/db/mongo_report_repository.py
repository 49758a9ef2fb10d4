# Standard library imports
from dataclasses import asdict
from datetime import datetime
from typing import Optional, List, Tuple, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING

# Local application imports
from ...core.time_utils import utc_now
from ...domain.repositories.report_repository import ReportRepository
from ...domain.models.report import Report, ReportPeriod, ReportFileInfo, DeliveryStatus
from ...domain.constants import ReportFields
from .mongo_connection import get_report_collection


class MongoReportRepository(ReportRepository):
    """MongoDB implementation of ReportRepository"""

    def __init__(self, report_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.report_collection = report_collection if report_collection is not None else get_report_collection()

    async def create(self, report: Report) -> Report:
        if not report:
            raise ValueError("Report cannot be None")

        try:
            doc = self._report_to_dict(report)
            doc[ReportFields.CREATED_AT] = report.created_at or utc_now()
            result = await self.report_collection.insert_one(doc)
            doc[ReportFields.MONGO_ID] = result.inserted_id
            return self._document_to_report(doc)
        except Exception as e:
            raise RuntimeError(f"Error saving report: {str(e)}")

    async def find_by_id(self, report_ref: str) -> Optional[Report]:
        if not report_ref:
            return None

        try:
            query = {ReportFields.MONGO_ID: ObjectId(report_ref)}
        except (InvalidId, ValueError, TypeError):
            query = {ReportFields.REPORT_ID: report_ref}

        try:
            doc = await self.report_collection.find_one(query)
            if doc is None:
                return None
            return self._document_to_report(doc)
        except Exception as e:
            raise RuntimeError(f"Error finding report: {str(e)}")

    async def list(
        self,
        report_type: Optional[str],
        start_date: Optional[datetime],
        end_date: Optional[datetime],
        skip: int,
        limit: int,
    ) -> Tuple[int, List[Report]]:
        query: Dict[str, Any] = {}
        if report_type:
            query[ReportFields.TYPE] = report_type
        if start_date or end_date:
            created_query: Dict[str, Any] = {}
            if start_date:
                created_query["$gte"] = start_date
            if end_date:
                created_query["$lte"] = end_date
            query[ReportFields.CREATED_AT] = created_query

        try:
            total = await self.report_collection.count_documents(query)
            cursor = (
                self.report_collection.find(query)
                .sort(ReportFields.CREATED_AT, DESCENDING)
                .skip(max(0, int(skip)))
                .limit(max(1, int(limit)))
            )
            items: List[Report] = []
            async for doc in cursor:
                items.append(self._document_to_report(doc))
            return total, items
        except Exception as e:
            raise RuntimeError(f"Error listing reports: {str(e)}")

    async def update_delivery_status(self, report_id: str, status: DeliveryStatus) -> None:
        try:
            await self.report_collection.update_one(
                {ReportFields.REPORT_ID: report_id},
                {"$set": {ReportFields.DELIVERY_STATUS: asdict(status)}},
            )
        except Exception as e:
            raise RuntimeError(f"Error updating report delivery status: {str(e)}")

    def _document_to_report(self, doc: Dict[str, Any]) -> Report:
        period = doc.get(ReportFields.PERIOD) or {}
        file_info = doc.get(ReportFields.FILE_INFO)
        delivery = doc.get(ReportFields.DELIVERY_STATUS) or {}

        return Report(
            id=str(doc.get(ReportFields.MONGO_ID)),
            report_id=doc.get(ReportFields.REPORT_ID, ""),
            type=doc.get(ReportFields.TYPE, "daily"),
            period=ReportPeriod(start_date=period["start_date"], end_date=period["end_date"]),
            project=doc.get(ReportFields.PROJECT, ""),
            site=doc.get(ReportFields.SITE, ""),
            prepared_for=doc.get(ReportFields.PREPARED_FOR, ""),
            prepared_by=doc.get(ReportFields.PREPARED_BY, ""),
            executive_summary=doc.get(ReportFields.EXECUTIVE_SUMMARY) or {},
            incidents=doc.get(ReportFields.INCIDENTS) or [],
            analytics=doc.get(ReportFields.ANALYTICS) or {},
            conclusion=doc.get(ReportFields.CONCLUSION, ""),
            file_info=ReportFileInfo(**file_info) if file_info else None,
            delivery_status=DeliveryStatus(**delivery),
            generated_by=doc.get(ReportFields.GENERATED_BY),
            created_at=doc.get(ReportFields.CREATED_AT),
        )

    def _report_to_dict(self, report: Report) -> Dict[str, Any]:
        return {
            ReportFields.REPORT_ID: report.report_id,
            ReportFields.TYPE: report.type,
            ReportFields.PROJECT: report.project,
            ReportFields.SITE: report.site,
            ReportFields.PREPARED_FOR: report.prepared_for,
            ReportFields.PREPARED_BY: report.prepared_by,
            ReportFields.PERIOD: asdict(report.period),
            ReportFields.EXECUTIVE_SUMMARY: report.executive_summary,
            ReportFields.INCIDENTS: report.incidents,
            ReportFields.ANALYTICS: report.analytics,
            ReportFields.CONCLUSION: report.conclusion,
            ReportFields.FILE_INFO: asdict(report.file_info) if report.file_info else None,
            ReportFields.DELIVERY_STATUS: asdict(report.delivery_status),
            ReportFields.GENERATED_BY: report.generated_by,
        }
