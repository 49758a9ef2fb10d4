# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.config import get_settings
from ....core.time_utils import utc_now, to_naive_utc
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ....domain.repositories.report_repository import ReportRepository
from ....domain.repositories.sequence_repository import SequenceRepository
from ....domain.models.report import Report, ReportPeriod, DeliveryStatus
from ....domain.constants import CounterFields
from ....domain.services import generate_report_id
from ....infrastructure.external.email_service import EmailService
from ....infrastructure.reports.report_writer import ReportWriter
from ...dto.report_dto import ReportGenerateRequest, ReportResponse
from .report_content import (
    resolve_period,
    summarize_incident,
    build_executive_summary,
    build_analytics,
    build_conclusion,
)

logger = logging.getLogger(__name__)


class GenerateReportUseCase:
    """
    Generate a report synchronously.

    Gathers the period's incidents, builds summary and analytics sections,
    writes the report file, stores the report and optionally mails it.
    Mail failures are recorded on the report, never raised.
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        incident_repository: IncidentRepository,
        sequence_repository: SequenceRepository,
        report_writer: ReportWriter,
        email_service: EmailService,
    ) -> None:
        self.report_repository = report_repository
        self.incident_repository = incident_repository
        self.sequence_repository = sequence_repository
        self.report_writer = report_writer
        self.email_service = email_service

    async def execute(self, request: ReportGenerateRequest, user_id: Optional[str]) -> ReportResponse:
        now = utc_now()
        start, end = resolve_period(
            request.type.value,
            now,
            to_naive_utc(request.start_date) if request.start_date else None,
            to_naive_utc(request.end_date) if request.end_date else None,
        )

        incidents = await self.incident_repository.find_matching(
            IncidentFilter(start_date=start, end_date=end)
        )
        # Chronological order for the incident log
        incidents = sorted(incidents, key=lambda i: (i.created_at or now, i.sequence or 0))

        sequence = await self.sequence_repository.next_value(CounterFields.REPORT_SEQUENCE)
        settings = get_settings()
        summary = build_executive_summary(incidents)
        report = Report(
            id=None,
            report_id=generate_report_id(now, sequence),
            type=request.type.value,
            period=ReportPeriod(start_date=start, end_date=end),
            project=settings.report_project,
            site=settings.report_site,
            prepared_for=settings.report_prepared_for,
            prepared_by=settings.report_prepared_by,
            executive_summary=summary,
            incidents=[summarize_incident(i) for i in incidents],
            analytics=build_analytics(incidents),
            conclusion=build_conclusion(summary),
            generated_by=user_id,
            created_at=now,
        )
        report.file_info = self.report_writer.write(report, request.format.value)
        saved = await self.report_repository.create(report)

        recipients = [str(email) for email in request.email_recipients]
        if recipients:
            saved.delivery_status = await self._deliver(saved, recipients)
            await self.report_repository.update_delivery_status(saved.id, saved.delivery_status)

        logger.info(f"Report generated: {saved.report_id} with {len(incidents)} incidents by user: {user_id}")
        return ReportResponse.from_domain(saved)

    async def _deliver(self, report: Report, recipients: list) -> DeliveryStatus:
        period_label = (
            f"{report.period.start_date.strftime('%Y-%m-%d')} to {report.period.end_date.strftime('%Y-%m-%d')}"
        )
        sent = await self.email_service.send_report(
            recipients,
            report.type,
            period_label,
            report.executive_summary,
            report.file_info.path if report.file_info else None,
        )
        if not sent:
            logger.warning(f"Report {report.report_id} could not be mailed to {recipients}")
        return DeliveryStatus(
            email_sent=sent,
            sent_at=utc_now() if sent else None,
            recipients=recipients,
            delivery_errors=[] if sent else ["Email delivery failed"],
        )
