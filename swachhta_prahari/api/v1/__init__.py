"""Version 1 HTTP and WebSocket routers"""

from .auth_controller import router as auth_router
from .camera_controller import router as camera_router
from .incident_controller import router as incident_router
from .ai_controller import router as ai_router
from .report_controller import router as report_router
from .payout_controller import router as payout_router
from .manager_controller import router as manager_router
from .analytics_controller import router as analytics_router
from .realtime_controller import router as realtime_router

__all__ = [
    "auth_router",
    "camera_router",
    "incident_router",
    "ai_router",
    "report_router",
    "payout_router",
    "manager_router",
    "analytics_router",
    "realtime_router",
]
