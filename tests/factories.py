"""Builders for domain objects used across tests"""
from datetime import datetime

from swachhta_prahari.domain.models.camera import Camera, CameraLocation, AIConfig
from swachhta_prahari.domain.models.incident import Incident, AIDetection, IncidentLocation
from swachhta_prahari.domain.models.user import User


def make_camera(camera_id: str = "CAM-001", zone: str = "A", threshold: float = 0.85, **kwargs) -> Camera:
    return Camera(
        id=kwargs.pop("id", "64b000000000000000000001"),
        camera_id=camera_id,
        name=kwargs.pop("name", "Gate Camera"),
        location=CameraLocation(zone=zone, position="North gate"),
        rtsp_url="rtsp://10.0.0.5/stream",
        ai_config=AIConfig(confidence_threshold=threshold),
        **kwargs,
    )


def make_incident(
    incident_id: str = "INC-1700000000000-0001",
    incident_type: str = "overflow",
    severity: str = "medium",
    status: str = "detected",
    zone: str = "A",
    **kwargs,
) -> Incident:
    return Incident(
        id=kwargs.pop("id", "64b000000000000000000010"),
        incident_id=incident_id,
        type=incident_type,
        severity=severity,
        status=status,
        camera_id=kwargs.pop("camera_id", "CAM-001"),
        camera_name="Gate Camera",
        location=IncidentLocation(zone=zone, specific="Gate vicinity"),
        ai_detection=AIDetection(confidence=kwargs.pop("confidence", 0.9)),
        created_at=kwargs.pop("created_at", datetime(2025, 1, 10, 8, 0, 0)),
        **kwargs,
    )


def make_user(user_id: str = "usr-1", role: str = "camera", is_active: bool = True, **kwargs) -> User:
    return User(
        id=user_id,
        username=kwargs.pop("username", "gatekeeper"),
        email=kwargs.pop("email", "gate@example.com"),
        hashed_password=kwargs.pop("hashed_password", "$2b$04$hash"),
        name=kwargs.pop("name", "Gate Keeper"),
        role=role,
        is_active=is_active,
        **kwargs,
    )
