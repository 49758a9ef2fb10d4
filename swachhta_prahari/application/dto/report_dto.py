from datetime import datetime
from typing import Optional, List, Dict, Any

from pydantic import EmailStr, Field

from ...domain.constants import ReportType, ReportFormat
from ...domain.models.report import Report
from .base import ApiModel


class ReportGenerateRequest(ApiModel):
    type: ReportType
    format: ReportFormat = ReportFormat.PDF
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    email_recipients: List[EmailStr] = Field(default_factory=list)


class ReportFileResponse(ApiModel):
    filename: str
    format: str
    size: int
    generated_at: datetime


class DeliveryStatusResponse(ApiModel):
    email_sent: bool = False
    sent_at: Optional[datetime] = None
    recipients: List[str] = Field(default_factory=list)
    delivery_errors: List[str] = Field(default_factory=list)


class ReportResponse(ApiModel):
    id: str
    report_id: str
    type: str
    project: str
    site: str
    prepared_for: str
    prepared_by: str
    start_date: datetime
    end_date: datetime
    executive_summary: Dict[str, Any]
    incident_count: int
    analytics: Dict[str, Any]
    conclusion: str
    file_info: Optional[ReportFileResponse] = None
    delivery_status: DeliveryStatusResponse
    generated_by: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, report: Report) -> "ReportResponse":
        file_info = report.file_info
        return cls(
            id=report.id or "",
            report_id=report.report_id,
            type=report.type,
            project=report.project,
            site=report.site,
            prepared_for=report.prepared_for,
            prepared_by=report.prepared_by,
            start_date=report.period.start_date,
            end_date=report.period.end_date,
            executive_summary=report.executive_summary,
            incident_count=len(report.incidents),
            analytics=report.analytics,
            conclusion=report.conclusion,
            file_info=ReportFileResponse(
                filename=file_info.filename,
                format=file_info.format,
                size=file_info.size,
                generated_at=file_info.generated_at,
            ) if file_info else None,
            delivery_status=DeliveryStatusResponse(
                email_sent=report.delivery_status.email_sent,
                sent_at=report.delivery_status.sent_at,
                recipients=report.delivery_status.recipients,
                delivery_errors=report.delivery_status.delivery_errors,
            ),
            generated_by=report.generated_by,
            created_at=report.created_at,
        )


class ReportDownload(ApiModel):
    path: str
    filename: str
    media_type: str
