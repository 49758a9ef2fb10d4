from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .service_provider import ServiceProvider
from .auth_provider import AuthProvider
from .camera_provider import CameraProvider
from .incident_provider import IncidentProvider
from .detection_provider import DetectionProvider
from .report_provider import ReportProvider
from .payout_provider import PayoutProvider
from .manager_provider import ManagerProvider
from .analytics_provider import AnalyticsProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ServiceProvider",
    "AuthProvider",
    "CameraProvider",
    "IncidentProvider",
    "DetectionProvider",
    "ReportProvider",
    "PayoutProvider",
    "ManagerProvider",
    "AnalyticsProvider",
]
