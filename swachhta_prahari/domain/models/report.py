from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

from ..constants.enums import ReportType


@dataclass
class ReportPeriod:
    start_date: datetime
    end_date: datetime


@dataclass
class ReportFileInfo:
    filename: str
    path: str
    format: str
    size: int
    generated_at: datetime


@dataclass
class DeliveryStatus:
    email_sent: bool = False
    sent_at: Optional[datetime] = None
    recipients: List[str] = field(default_factory=list)
    delivery_errors: List[str] = field(default_factory=list)


@dataclass
class Report:
    """Domain model for a generated compliance report"""
    id: Optional[str]
    report_id: str
    type: str
    period: ReportPeriod
    project: str = ""
    site: str = ""
    prepared_for: str = ""
    prepared_by: str = ""
    executive_summary: Dict[str, Any] = field(default_factory=dict)
    incidents: List[Dict[str, Any]] = field(default_factory=list)
    analytics: Dict[str, Any] = field(default_factory=dict)
    conclusion: str = ""
    file_info: Optional[ReportFileInfo] = None
    delivery_status: DeliveryStatus = field(default_factory=DeliveryStatus)
    generated_by: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.type not in {t.value for t in ReportType}:
            raise ValueError(f"Invalid report type: {self.type}")
        if self.period.end_date < self.period.start_date:
            raise ValueError("Report period end must not precede its start")
