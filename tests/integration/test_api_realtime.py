"""
Integration tests for the /ws relay endpoint.
"""
from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from starlette.websockets import WebSocketDisconnect

pytestmark = pytest.mark.integration

from swachhta_prahari.application.dto.analytics_dto import LiveData
from swachhta_prahari.application.use_cases.analytics import GetLiveDataUseCase
from swachhta_prahari.application.use_cases.auth import GetCurrentUserUseCase
from swachhta_prahari.domain.exceptions import AuthenticationError
from swachhta_prahari.infrastructure.notifications import WebSocketManager, Rooms

from tests.factories import make_user


@pytest.fixture
def relay(registry):
    manager = WebSocketManager()
    auth = AsyncMock(spec=GetCurrentUserUseCase)
    auth.execute.return_value = make_user("usr-1", role="camera")
    registry[WebSocketManager] = manager
    registry[GetCurrentUserUseCase] = auth
    return manager, auth


class TestRealtimeRelay:
    def test_rejects_missing_token(self, client, relay):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/ws"):
                pass
        assert exc_info.value.code == 1008

    def test_rejects_invalid_token(self, client, relay):
        relay[1].execute.side_effect = AuthenticationError("User not found or inactive")
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/ws?token=bad"):
                pass
        assert exc_info.value.code == 1008

    def test_connect_joins_rooms(self, client, relay):
        manager, _ = relay
        with client.websocket_connect("/ws?token=good") as websocket:
            message = websocket.receive_json()
            assert message["event"] == "connected"
            assert message["data"]["userId"] == "usr-1"
            assert message["data"]["role"] == "camera"
            assert manager.room_size(Rooms.AUTHENTICATED) == 1
            assert manager.room_size(Rooms.role("camera")) == 1
            assert manager.room_size(Rooms.user("usr-1")) == 1

            websocket.send_text("ping")
            assert websocket.receive_json()["event"] == "pong"

    def test_bearer_header_is_accepted(self, client, relay):
        with client.websocket_connect("/ws", headers={"Authorization": "Bearer good"}) as websocket:
            assert websocket.receive_json()["event"] == "connected"
        relay[1].execute.assert_awaited_with("good")

    def test_camera_subscription(self, client, relay):
        manager, _ = relay
        with client.websocket_connect("/ws?token=good") as websocket:
            websocket.receive_json()
            websocket.send_json({"event": "subscribe_to_camera", "data": "cam-001"})
            # Round trip so the subscribe frame has been handled
            websocket.send_text("ping")
            websocket.receive_json()
            assert manager.room_size("camera_CAM-001") == 1

            websocket.send_json({"event": "unsubscribe_from_camera", "data": {"cameraId": "cam-001"}})
            websocket.send_text("ping")
            websocket.receive_json()
            assert manager.room_size("camera_CAM-001") == 0

    def test_live_data(self, client, relay, registry):
        live = AsyncMock(spec=GetLiveDataUseCase)
        live.execute.return_value = LiveData(
            timestamp=datetime(2025, 1, 10, 8, 0),
            system_status="operational",
            active_cameras=3,
            total_cameras=16,
            pending_incidents=2,
        )
        registry[GetLiveDataUseCase] = live

        with client.websocket_connect("/ws?token=good") as websocket:
            websocket.receive_json()
            websocket.send_json({"event": "request_live_data"})
            message = websocket.receive_json()

        assert message["event"] == "live_data"
        assert message["data"]["activeCameras"] == 3
        assert message["data"]["pendingIncidents"] == 2
