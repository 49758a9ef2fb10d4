"""
Unit tests for the WebSocket relay: rooms, delivery and the incident broadcaster.
Uses fake sockets that record what they were sent.
"""
import json

import pytest

from swachhta_prahari.infrastructure.notifications import (
    WebSocketManager,
    Rooms,
    IncidentBroadcaster,
    IncidentEvents,
)

from tests.factories import make_incident


class FakeWebSocket:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []

    async def send_text(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("connection closed")
        self.sent.append(json.loads(text))

    def events(self):
        return [message["event"] for message in self.sent]


class TestRooms:
    def test_names(self):
        assert Rooms.AUTHENTICATED == "authenticated_users"
        assert Rooms.role("admin") == "role_admin"
        assert Rooms.user("u1") == "user_u1"
        assert Rooms.camera(" cam-001 ") == "camera_CAM-001"


class TestWebSocketManager:
    @pytest.mark.asyncio
    async def test_emit_reaches_only_room_members(self):
        manager = WebSocketManager()
        admin, operator = FakeWebSocket(), FakeWebSocket()
        await manager.add_connection("u1", admin, rooms=[Rooms.AUTHENTICATED, Rooms.role("admin")])
        await manager.add_connection("u2", operator, rooms=[Rooms.AUTHENTICATED, Rooms.role("camera")])

        sent = await manager.emit_to_room(Rooms.role("admin"), "critical_incident", {"id": 1})

        assert sent == 1
        assert admin.sent == [{"event": "critical_incident", "data": {"id": 1}}]
        assert operator.sent == []

    @pytest.mark.asyncio
    async def test_join_and_leave_camera_room(self):
        manager = WebSocketManager()
        socket = FakeWebSocket()
        await manager.add_connection("u1", socket)
        manager.join(socket, Rooms.camera("CAM-001"))
        assert manager.room_size("camera_CAM-001") == 1

        manager.leave(socket, Rooms.camera("CAM-001"))
        assert manager.room_size("camera_CAM-001") == 0
        assert await manager.emit_to_room("camera_CAM-001", "camera_update", {}) == 0

    @pytest.mark.asyncio
    async def test_remove_connection_leaves_all_rooms(self):
        manager = WebSocketManager()
        socket = FakeWebSocket()
        await manager.add_connection("u1", socket, rooms=[Rooms.AUTHENTICATED, Rooms.user("u1")])
        await manager.remove_connection("u1", socket)

        assert manager.get_total_connections() == 0
        assert manager.room_size(Rooms.AUTHENTICATED) == 0
        assert manager.has_connections("u1") is False

    @pytest.mark.asyncio
    async def test_failed_socket_is_dropped(self):
        manager = WebSocketManager()
        healthy, broken = FakeWebSocket(), FakeWebSocket(fail=True)
        await manager.add_connection("u1", healthy, rooms=[Rooms.AUTHENTICATED])
        await manager.add_connection("u2", broken, rooms=[Rooms.AUTHENTICATED])

        assert await manager.broadcast_to_all("system_status", {}) == 1
        assert manager.get_connected_users() == ["u1"]
        assert manager.room_size(Rooms.AUTHENTICATED) == 1

    @pytest.mark.asyncio
    async def test_send_to_user_reaches_every_connection(self):
        manager = WebSocketManager()
        phone, laptop = FakeWebSocket(), FakeWebSocket()
        await manager.add_connection("u1", phone)
        await manager.add_connection("u1", laptop)
        assert await manager.send_to_user("u1", "pong", {}) == 2
        assert await manager.send_to_user("nobody", "pong", {}) == 0


class TestIncidentBroadcaster:
    @pytest.mark.asyncio
    async def test_critical_incident_fans_out(self):
        manager = WebSocketManager()
        viewer, admin, watcher = FakeWebSocket(), FakeWebSocket(), FakeWebSocket()
        await manager.add_connection("u1", viewer, rooms=[Rooms.AUTHENTICATED])
        await manager.add_connection("u2", admin, rooms=[Rooms.AUTHENTICATED, Rooms.role("admin")])
        await manager.add_connection("u3", watcher, rooms=[Rooms.camera("CAM-001")])

        incident = make_incident(severity="critical", incident_type="illegal_dumping")
        await IncidentBroadcaster(manager).broadcast_incident(IncidentEvents.AI_DETECTION, incident)

        assert viewer.events() == ["incident_update"]
        assert admin.events() == ["incident_update", "critical_incident"]
        assert watcher.events() == ["camera_incident"]
        payload = viewer.sent[0]["data"]
        assert payload["type"] == "ai_detection"
        assert payload["incident"]["incidentId"] == incident.incident_id
        assert payload["incident"]["camera"]["cameraId"] == "CAM-001"

    @pytest.mark.asyncio
    async def test_non_critical_skips_admin_room(self):
        manager = WebSocketManager()
        admin = FakeWebSocket()
        await manager.add_connection("u2", admin, rooms=[Rooms.role("admin")])
        await IncidentBroadcaster(manager).broadcast_incident(IncidentEvents.NEW_INCIDENT, make_incident())
        assert admin.sent == []

    @pytest.mark.asyncio
    async def test_camera_status_change(self):
        manager = WebSocketManager()
        viewer, watcher = FakeWebSocket(), FakeWebSocket()
        await manager.add_connection("u1", viewer, rooms=[Rooms.AUTHENTICATED])
        await manager.add_connection("u2", watcher, rooms=[Rooms.camera("CAM-002")])

        await IncidentBroadcaster(manager).broadcast_camera_status("CAM-002", "maintenance", {"action": "restart"})

        assert viewer.events() == ["camera_status_change"]
        assert watcher.events() == ["camera_update"]
        assert watcher.sent[0]["data"]["action"] == "restart"

    @pytest.mark.asyncio
    async def test_failures_are_swallowed(self):
        class BrokenManager:
            async def emit_to_room(self, *args):
                raise RuntimeError("relay down")

        # Must not raise
        await IncidentBroadcaster(BrokenManager()).broadcast_incident(IncidentEvents.NEW_INCIDENT, make_incident())
        await IncidentBroadcaster(BrokenManager()).broadcast_system_status({"status": "ok"})
