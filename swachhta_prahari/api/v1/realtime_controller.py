"""Real-time relay endpoint: authenticated WebSocket with room subscriptions"""

import json
import logging
from typing import Any, Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, Query

from ...application.use_cases.analytics import GetLiveDataUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...domain.exceptions import AuthenticationError
from ...domain.models.user import User
from ...infrastructure.notifications import WebSocketManager, Rooms
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])


def _extract_token(websocket: WebSocket, token: Optional[str]) -> Optional[str]:
    if token:
        return token
    authorization = websocket.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


async def _authenticate(token: Optional[str]) -> Optional[User]:
    if not token:
        return None
    try:
        return await get_container().get(GetCurrentUserUseCase).execute(token)
    except AuthenticationError as exception:
        logger.warning(f"Rejected WebSocket connection: {exception.message}")
        return None


def _parse_message(raw: str) -> tuple:
    """Split a client frame into (event, data); plain text frames carry no data"""
    try:
        message = json.loads(raw)
    except ValueError:
        return raw.strip(), None
    if isinstance(message, dict):
        return message.get("event"), message.get("data")
    if isinstance(message, str):
        return message, None
    return None, None


def _camera_id_of(data: Any) -> Optional[str]:
    if isinstance(data, dict):
        data = data.get("cameraId")
    if isinstance(data, str) and data.strip():
        return data
    return None


async def handle_client_message(manager: WebSocketManager, websocket: WebSocket, raw: str) -> None:
    """
    Dispatch one client frame.

    Clients may only join and leave camera rooms; the authenticated, role
    and user rooms are fixed at connect time.
    """
    event, data = _parse_message(raw)

    if event == "ping":
        await manager.send_event(websocket, "pong", {})
    elif event == "subscribe_to_camera":
        camera_id = _camera_id_of(data)
        if camera_id:
            manager.join(websocket, Rooms.camera(camera_id))
    elif event == "unsubscribe_from_camera":
        camera_id = _camera_id_of(data)
        if camera_id:
            manager.leave(websocket, Rooms.camera(camera_id))
    elif event == "request_live_data":
        live_data = await get_container().get(GetLiveDataUseCase).execute()
        await manager.send_event(websocket, "live_data", live_data.model_dump(by_alias=True, mode="json"))
    else:
        logger.debug(f"Ignoring unknown WebSocket event: {event}")


@router.websocket("/ws")
async def websocket_relay(
    websocket: WebSocket,
    token: Optional[str] = Query(None, description="JWT access token for authentication"),
):
    """
    WebSocket endpoint for incident and camera notifications.

    The access token is read from the ``token`` query parameter or an
    ``Authorization: Bearer`` header. Connections without a valid token for
    an active user are closed with code 1008.

    Example connection:
        ws://host/ws?token=<jwt_token>
    """
    user = await _authenticate(_extract_token(websocket, token))
    if user is None:
        await websocket.close(code=1008, reason="Authentication error")
        return

    manager = get_container().get(WebSocketManager)
    user_id = user.id or ""

    await websocket.accept()
    logger.info(f"WebSocket connection accepted for user {user_id}")

    try:
        await manager.add_connection(
            user_id,
            websocket,
            rooms=(Rooms.AUTHENTICATED, Rooms.role(user.role), Rooms.user(user_id)),
        )
        await manager.send_event(websocket, "connected", {
            "message": "Connected to Swachhta Prahari real-time service",
            "userId": user_id,
            "role": user.role,
        })

        while True:
            try:
                raw = await websocket.receive_text()
            except WebSocketDisconnect:
                logger.info(f"WebSocket disconnected for user {user_id}")
                break
            await handle_client_message(manager, websocket, raw)
    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected for user {user_id}")
    except Exception as e:
        logger.error(f"Error in WebSocket connection for user {user_id}: {e}", exc_info=True)
    finally:
        await manager.remove_connection(user_id, websocket)
        logger.info(f"WebSocket connection cleaned up for user {user_id}")
