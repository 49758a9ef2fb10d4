"""WebSocket Manager for managing client connections, rooms and broadcasts"""

import json
import logging
from threading import Lock
from typing import Any, Dict, Iterable, List, Set

from fastapi import WebSocket
from fastapi.encoders import jsonable_encoder

logger = logging.getLogger(__name__)


class Rooms:
    """Room naming used by the relay"""
    AUTHENTICATED = "authenticated_users"

    @staticmethod
    def role(role: str) -> str:
        return f"role_{role}"

    @staticmethod
    def user(user_id: str) -> str:
        return f"user_{user_id}"

    @staticmethod
    def camera(camera_id: str) -> str:
        return f"camera_{camera_id.strip().upper()}"


def encode_message(event: str, data: Any) -> str:
    """Serialize a server message as JSON {event, data}"""
    return json.dumps({"event": event, "data": jsonable_encoder(data)})


class WebSocketManager:
    """
    Manages WebSocket connections and room membership.

    A connection belongs to one user and any number of rooms. Messages are
    delivered to a room, to every connection of a user, or to everyone.
    Thread-safe connection management; sends happen outside the lock.
    """

    def __init__(self):
        """Initialize WebSocket manager"""
        # Map user_id -> Set of WebSocket connections
        self._connections: Dict[str, Set[WebSocket]] = {}
        # Map room name -> Set of WebSocket connections
        self._rooms: Dict[str, Set[WebSocket]] = {}
        # Map connection -> (user_id, rooms joined)
        self._memberships: Dict[WebSocket, Set[str]] = {}
        self._owners: Dict[WebSocket, str] = {}
        self._lock = Lock()
        logger.info("WebSocketManager initialized")

    async def add_connection(self, user_id: str, websocket: WebSocket, rooms: Iterable[str] = ()) -> None:
        """
        Register a connection for a user and join it to the given rooms.

        Args:
            user_id: User ID who owns this connection
            websocket: WebSocket connection instance
            rooms: Room names to join immediately
        """
        with self._lock:
            self._connections.setdefault(user_id, set()).add(websocket)
            self._owners[websocket] = user_id
            self._memberships.setdefault(websocket, set())
            for room in rooms:
                self._join_locked(websocket, room)

        logger.info(f"Added WebSocket connection for user {user_id}. Total connections: {self.get_total_connections()}")

    async def remove_connection(self, user_id: str, websocket: WebSocket) -> None:
        """
        Remove a connection from its user and from every room it joined.

        Args:
            user_id: User ID who owns this connection
            websocket: WebSocket connection instance
        """
        with self._lock:
            self._drop_locked(user_id, websocket)

        logger.info(f"Removed WebSocket connection for user {user_id}. Total connections: {self.get_total_connections()}")

    def join(self, websocket: WebSocket, room: str) -> None:
        with self._lock:
            self._join_locked(websocket, room)

    def leave(self, websocket: WebSocket, room: str) -> None:
        with self._lock:
            members = self._rooms.get(room)
            if members is not None:
                members.discard(websocket)
                if not members:
                    del self._rooms[room]
            self._memberships.get(websocket, set()).discard(room)

    def rooms_of(self, websocket: WebSocket) -> Set[str]:
        with self._lock:
            return set(self._memberships.get(websocket, set()))

    async def send_event(self, websocket: WebSocket, event: str, data: Any) -> bool:
        """Send one event to a single connection; returns False if the send failed"""
        try:
            await websocket.send_text(encode_message(event, data))
            return True
        except Exception as e:
            logger.warning(f"Failed to send '{event}' to connection: {e}")
            return False

    async def emit_to_room(self, room: str, event: str, data: Any) -> int:
        """
        Send an event to every connection in a room.

        Args:
            room: Room name
            event: Event name
            data: JSON-serialisable payload

        Returns:
            Number of connections the message was successfully sent to
        """
        with self._lock:
            connections = list(self._rooms.get(room, set()))

        if not connections:
            logger.debug(f"No connections in room {room}")
            return 0

        sent_count = await self._deliver(connections, encode_message(event, data))
        logger.debug(f"Sent '{event}' to {sent_count}/{len(connections)} connections in room {room}")
        return sent_count

    async def send_to_user(self, user_id: str, event: str, data: Any) -> int:
        """
        Send an event to all WebSocket connections for a specific user.

        Returns:
            Number of connections the message was successfully sent to
        """
        with self._lock:
            connections = list(self._connections.get(user_id, set()))

        if not connections:
            logger.debug(f"No connections found for user {user_id}")
            return 0
        return await self._deliver(connections, encode_message(event, data))

    async def broadcast_to_all(self, event: str, data: Any) -> int:
        """Broadcast an event to all connected clients"""
        with self._lock:
            connections = list(self._owners.keys())

        total_sent = await self._deliver(connections, encode_message(event, data))
        logger.debug(f"Broadcast message sent to {total_sent} total connections")
        return total_sent

    def get_connected_users(self) -> List[str]:
        with self._lock:
            return list(self._connections.keys())

    def get_total_connections(self) -> int:
        """
        Get total number of active WebSocket connections.

        Returns:
            Total number of connections across all users
        """
        with self._lock:
            return sum(len(connections) for connections in self._connections.values())

    def room_size(self, room: str) -> int:
        with self._lock:
            return len(self._rooms.get(room, set()))

    def has_connections(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._connections and len(self._connections[user_id]) > 0

    async def _deliver(self, connections: List[WebSocket], message_json: str) -> int:
        sent_count = 0
        disconnected: List[WebSocket] = []

        for websocket in connections:
            try:
                await websocket.send_text(message_json)
                sent_count += 1
            except Exception as e:
                logger.warning(f"Failed to send message to connection: {e}")
                disconnected.append(websocket)

        # Clean up disconnected connections
        if disconnected:
            with self._lock:
                for websocket in disconnected:
                    owner = self._owners.get(websocket)
                    if owner is not None:
                        self._drop_locked(owner, websocket)
        return sent_count

    def _join_locked(self, websocket: WebSocket, room: str) -> None:
        self._rooms.setdefault(room, set()).add(websocket)
        self._memberships.setdefault(websocket, set()).add(room)

    def _drop_locked(self, user_id: str, websocket: WebSocket) -> None:
        if user_id in self._connections:
            self._connections[user_id].discard(websocket)
            # Clean up empty sets
            if not self._connections[user_id]:
                del self._connections[user_id]

        for room in self._memberships.pop(websocket, set()):
            members = self._rooms.get(room)
            if members is not None:
                members.discard(websocket)
                if not members:
                    del self._rooms[room]
        self._owners.pop(websocket, None)
