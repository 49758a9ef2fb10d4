from typing import TYPE_CHECKING
from ...infrastructure.notifications import WebSocketManager, IncidentBroadcaster
from ...infrastructure.external import EmailService, VideoStorageClient
from ...infrastructure.reports.report_writer import ReportWriter
from ...infrastructure.jobs.keep_alive import KeepAliveJob

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Infrastructure services shared by use cases and the realtime endpoint"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        websocket_manager = WebSocketManager()
        container.register_singleton(WebSocketManager, websocket_manager)
        container.register_singleton(IncidentBroadcaster, IncidentBroadcaster(websocket_manager))

        container.register_singleton(EmailService, EmailService())
        container.register_singleton(VideoStorageClient, VideoStorageClient())
        container.register_singleton(ReportWriter, ReportWriter())
        container.register_singleton(KeepAliveJob, KeepAliveJob())
