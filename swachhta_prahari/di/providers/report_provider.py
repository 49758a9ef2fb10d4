from typing import TYPE_CHECKING
from ...domain.repositories import IncidentRepository, ReportRepository, SequenceRepository
from ...infrastructure.external import EmailService
from ...infrastructure.reports.report_writer import ReportWriter
from ...application.use_cases.report import (
    GenerateReportUseCase,
    ListReportsUseCase,
    DownloadReportUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ReportProvider:
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GenerateReportUseCase,
            lambda: GenerateReportUseCase(
                report_repository=container.get(ReportRepository),
                incident_repository=container.get(IncidentRepository),
                sequence_repository=container.get(SequenceRepository),
                report_writer=container.get(ReportWriter),
                email_service=container.get(EmailService),
            )
        )
        container.register_factory(
            ListReportsUseCase,
            lambda: ListReportsUseCase(report_repository=container.get(ReportRepository))
        )
        container.register_factory(
            DownloadReportUseCase,
            lambda: DownloadReportUseCase(report_repository=container.get(ReportRepository))
        )
