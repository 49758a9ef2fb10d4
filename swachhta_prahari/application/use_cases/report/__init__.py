from .generate_report import GenerateReportUseCase
from .list_reports import ListReportsUseCase
from .download_report import DownloadReportUseCase

__all__ = [
    "GenerateReportUseCase",
    "ListReportsUseCase",
    "DownloadReportUseCase",
]
