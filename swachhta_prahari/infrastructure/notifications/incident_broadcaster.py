"""Publishes incident, camera and system events to relay rooms"""

import logging
from typing import Any, Dict, Optional

from ...core.time_utils import utc_now
from ...domain.constants import Severity, UserRole
from ...domain.models.incident import Incident
from .websocket_manager import WebSocketManager, Rooms

logger = logging.getLogger(__name__)


class IncidentEvents:
    """Event types carried inside incident_update payloads"""
    AI_DETECTION = "ai_detection"
    NEW_INCIDENT = "new_incident"
    INCIDENT_UPDATED = "incident_updated"
    INCIDENT_ASSIGNED = "incident_assigned"


class IncidentBroadcaster:
    """
    Fire-and-forget publisher for realtime events.

    Every method logs and swallows delivery failures: a broken relay must
    never fail the request that triggered the event.
    """

    def __init__(self, websocket_manager: WebSocketManager) -> None:
        self.websocket_manager = websocket_manager

    @staticmethod
    def format_incident_event(event_type: str, incident: Incident) -> Dict[str, Any]:
        return {
            "type": event_type,
            "timestamp": utc_now(),
            "incident": {
                "id": incident.id,
                "incidentId": incident.incident_id,
                "type": incident.type,
                "severity": incident.severity,
                "status": incident.status,
                "camera": {
                    "cameraId": incident.camera_id,
                    "name": incident.camera_name,
                },
                "location": {
                    "zone": incident.location.zone,
                    "specific": incident.location.specific,
                },
                "description": incident.description,
                "version": incident.version,
                "createdAt": incident.created_at,
            },
        }

    async def broadcast_incident(self, event_type: str, incident: Incident) -> None:
        try:
            payload = self.format_incident_event(event_type, incident)
            await self.websocket_manager.emit_to_room(Rooms.AUTHENTICATED, "incident_update", payload)
            if incident.camera_id:
                await self.websocket_manager.emit_to_room(
                    Rooms.camera(incident.camera_id), "camera_incident", payload
                )
            if incident.severity == Severity.CRITICAL.value:
                await self.websocket_manager.emit_to_room(
                    Rooms.role(UserRole.ADMIN.value), "critical_incident", payload
                )
            logger.info(f"Broadcasted {event_type} for incident {incident.incident_id}")
        except Exception as e:
            logger.error(f"Broadcast incident error: {e}", exc_info=True)

    async def broadcast_camera_status(
        self, camera_id: str, status: str, metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        try:
            payload = {
                "cameraId": camera_id,
                "status": status,
                "timestamp": utc_now(),
                **(metadata or {}),
            }
            await self.websocket_manager.emit_to_room(Rooms.AUTHENTICATED, "camera_status_change", payload)
            await self.websocket_manager.emit_to_room(Rooms.camera(camera_id), "camera_update", payload)
            logger.info(f"Broadcasted camera status change: {camera_id} -> {status}")
        except Exception as e:
            logger.error(f"Broadcast camera status error: {e}", exc_info=True)

    async def broadcast_system_status(self, update: Dict[str, Any]) -> None:
        try:
            payload = {"timestamp": utc_now(), **update}
            await self.websocket_manager.emit_to_room(Rooms.AUTHENTICATED, "system_status", payload)
            logger.info("Broadcasted system status update")
        except Exception as e:
            logger.error(f"Broadcast system status error: {e}", exc_info=True)
