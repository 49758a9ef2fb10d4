"""Notifications infrastructure for real-time incident relay"""

from .websocket_manager import WebSocketManager, Rooms
from .incident_broadcaster import IncidentBroadcaster, IncidentEvents

__all__ = [
    "WebSocketManager",
    "Rooms",
    "IncidentBroadcaster",
    "IncidentEvents",
]
