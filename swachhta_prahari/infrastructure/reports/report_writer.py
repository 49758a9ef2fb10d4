# Standard library imports
import json
import logging
import os
from typing import Any, Dict, Optional

# External package imports
from fastapi.encoders import jsonable_encoder

# Local application imports
from ...core.config import get_settings
from ...core.time_utils import utc_now
from ...domain.models.report import Report, ReportFileInfo

logger = logging.getLogger(__name__)

# Extension per requested format; content is structured JSON for every format
_EXTENSIONS = {
    "pdf": "pdf",
    "excel": "xlsx",
    "csv": "csv",
    "json": "json",
}


class ReportWriter:
    """
    Writes report content to the reports directory.

    Rendering to real PDF or spreadsheet templates is out of scope; the file
    carries the report as indented JSON under the requested extension.
    """

    def __init__(self, reports_dir: Optional[str] = None) -> None:
        self.reports_dir = reports_dir or get_settings().reports_dir

    def build_content(self, report: Report) -> Dict[str, Any]:
        return {
            "reportId": report.report_id,
            "type": report.type,
            "project": report.project,
            "site": report.site,
            "preparedFor": report.prepared_for,
            "preparedBy": report.prepared_by,
            "period": {
                "startDate": report.period.start_date,
                "endDate": report.period.end_date,
            },
            "executiveSummary": report.executive_summary,
            "incidents": report.incidents,
            "analytics": report.analytics,
            "conclusion": report.conclusion,
            "generatedAt": utc_now(),
            "generatedBy": report.generated_by,
        }

    def write(self, report: Report, report_format: str) -> ReportFileInfo:
        """
        Write the report and return its file info.

        Raises:
            RuntimeError: If the file cannot be written
        """
        extension = _EXTENSIONS.get(report_format, "json")
        filename = f"{report.report_id}.{extension}"
        path = os.path.join(self.reports_dir, filename)

        try:
            os.makedirs(self.reports_dir, exist_ok=True)
            with open(path, "w", encoding="utf-8") as fh:
                json.dump(jsonable_encoder(self.build_content(report)), fh, indent=2)
            size = os.path.getsize(path)
        except OSError as e:
            logger.error(f"Failed to write report {filename}: {e}")
            raise RuntimeError(f"Failed to write report file: {str(e)}")

        logger.info(f"Report generated: {filename} ({size} bytes)")
        return ReportFileInfo(
            filename=filename,
            path=path,
            format=report_format,
            size=size,
            generated_at=utc_now(),
        )
