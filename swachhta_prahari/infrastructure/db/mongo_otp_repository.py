# Standard library imports
from typing import Optional, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.otp_repository import OtpRepository
from ...domain.models.one_time_code import OneTimeCode
from ...domain.constants import OtpFields
from .mongo_connection import get_otp_collection


class MongoOtpRepository(OtpRepository):
    """MongoDB implementation of OtpRepository; expiry is left to the TTL index"""

    def __init__(self, otp_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.otp_collection = otp_collection if otp_collection is not None else get_otp_collection()

    async def save(self, code: OneTimeCode) -> OneTimeCode:
        email = code.email.strip().lower()
        try:
            await self.otp_collection.delete_many({OtpFields.EMAIL: email})
            doc = {
                OtpFields.EMAIL: email,
                OtpFields.OTP: code.otp,
                OtpFields.PURPOSE: code.purpose,
                OtpFields.CREATED_AT: code.created_at,
            }
            result = await self.otp_collection.insert_one(doc)
            doc[OtpFields.MONGO_ID] = result.inserted_id
            return self._document_to_code(doc)
        except Exception as e:
            raise RuntimeError(f"Error saving one-time code: {str(e)}")

    async def find(self, email: str, otp: str) -> Optional[OneTimeCode]:
        try:
            doc = await self.otp_collection.find_one(
                {OtpFields.EMAIL: email.strip().lower(), OtpFields.OTP: otp}
            )
            if doc is None:
                return None
            return self._document_to_code(doc)
        except Exception as e:
            raise RuntimeError(f"Error finding one-time code: {str(e)}")

    async def delete_for_email(self, email: str) -> None:
        try:
            await self.otp_collection.delete_many({OtpFields.EMAIL: email.strip().lower()})
        except Exception as e:
            raise RuntimeError(f"Error deleting one-time codes: {str(e)}")

    def _document_to_code(self, doc: Dict[str, Any]) -> OneTimeCode:
        return OneTimeCode(
            id=str(doc.get(OtpFields.MONGO_ID)),
            email=doc.get(OtpFields.EMAIL, ""),
            otp=doc.get(OtpFields.OTP, ""),
            purpose=doc.get(OtpFields.PURPOSE, ""),
            created_at=doc.get(OtpFields.CREATED_AT),
        )
