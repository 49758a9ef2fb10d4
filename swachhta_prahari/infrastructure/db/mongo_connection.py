# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import (
    UserFields,
    CameraFields,
    IncidentFields,
    ReportFields,
    PayoutFields,
    OtpFields,
)

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_connection() -> None:
    """Close the shared client; the next get_database() call reconnects."""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    return get_database()["users"]


def get_camera_collection() -> AsyncIOMotorCollection:
    return get_database()["cameras"]


def get_incident_collection() -> AsyncIOMotorCollection:
    return get_database()["incidents"]


def get_report_collection() -> AsyncIOMotorCollection:
    return get_database()["reports"]


def get_payout_collection() -> AsyncIOMotorCollection:
    return get_database()["payouts"]


def get_otp_collection() -> AsyncIOMotorCollection:
    """One-time codes; documents expire through a TTL index on created_at"""
    return get_database()["otps"]


def get_counter_collection() -> AsyncIOMotorCollection:
    return get_database()["counters"]


async def ensure_indexes() -> None:
    """
    Create the indexes the application relies on.

    Uniqueness of camera ids, incident ids, webhook idempotency keys,
    usernames, emails and payout keys is enforced here, as is OTP expiry.
    create_index is idempotent, so this runs on every startup.
    """
    settings = get_settings()

    users = get_user_collection()
    await users.create_index(UserFields.USERNAME, unique=True)
    await users.create_index(UserFields.EMAIL, unique=True)
    await users.create_index(UserFields.ROLE)

    cameras = get_camera_collection()
    await cameras.create_index(CameraFields.CAMERA_ID, unique=True)
    await cameras.create_index([(CameraFields.LOCATION_ZONE, ASCENDING), (CameraFields.STATUS, ASCENDING)])

    incidents = get_incident_collection()
    await incidents.create_index(IncidentFields.INCIDENT_ID, unique=True)
    await incidents.create_index(IncidentFields.IDEMPOTENCY_KEY, unique=True, sparse=True)
    await incidents.create_index([(IncidentFields.CREATED_AT, DESCENDING)])
    await incidents.create_index([(IncidentFields.CAMERA_ID, ASCENDING), (IncidentFields.CREATED_AT, DESCENDING)])
    await incidents.create_index([(IncidentFields.STATUS, ASCENDING), (IncidentFields.SEVERITY, ASCENDING)])
    await incidents.create_index(IncidentFields.LOCATION_ZONE)

    reports = get_report_collection()
    await reports.create_index(ReportFields.REPORT_ID, unique=True)
    await reports.create_index([(ReportFields.TYPE, ASCENDING), (ReportFields.CREATED_AT, DESCENDING)])

    payouts = get_payout_collection()
    await payouts.create_index(PayoutFields.PAYOUT_KEY, unique=True)
    await payouts.create_index([(PayoutFields.DATE, DESCENDING)])

    otps = get_otp_collection()
    await otps.create_index(OtpFields.CREATED_AT, expireAfterSeconds=settings.otp_ttl_seconds)
    await otps.create_index(OtpFields.EMAIL)

    logger.info("MongoDB indexes ensured on database '%s'", settings.mongo_database_name)
