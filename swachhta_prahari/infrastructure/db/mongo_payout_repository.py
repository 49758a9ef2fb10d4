# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument

# Local application imports
from ...core.time_utils import utc_now
from ...domain.repositories.payout_repository import PayoutRepository
from ...domain.models.payout import Payout
from ...domain.constants import PayoutFields
from .mongo_connection import get_payout_collection


class MongoPayoutRepository(PayoutRepository):
    """MongoDB implementation of PayoutRepository"""

    def __init__(self, payout_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.payout_collection = payout_collection if payout_collection is not None else get_payout_collection()

    async def list_all(self) -> List[Payout]:
        try:
            cursor = self.payout_collection.find({}).sort(PayoutFields.DATE, DESCENDING)
            payouts = []
            async for doc in cursor:
                payouts.append(self._document_to_payout(doc))
            return payouts
        except Exception as e:
            raise RuntimeError(f"Error listing payouts: {str(e)}")

    async def find_by_key(self, payout_key: str) -> Optional[Payout]:
        if not payout_key:
            return None
        try:
            doc = await self.payout_collection.find_one({PayoutFields.PAYOUT_KEY: payout_key})
            if doc is None:
                return None
            return self._document_to_payout(doc)
        except Exception as e:
            raise RuntimeError(f"Error finding payout: {str(e)}")

    async def upsert(self, payout: Payout) -> Payout:
        now = utc_now()
        try:
            doc = await self.payout_collection.find_one_and_update(
                {PayoutFields.PAYOUT_KEY: payout.payout_key},
                {
                    "$set": {
                        PayoutFields.DATE: payout.date,
                        PayoutFields.WORKER_COUNT: payout.worker_count,
                        PayoutFields.DAILY_WAGE: payout.daily_wage,
                        PayoutFields.STATUS: payout.status,
                        PayoutFields.UPDATED_AT: now,
                    },
                    "$setOnInsert": {PayoutFields.CREATED_AT: now},
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
            return self._document_to_payout(doc)
        except Exception as e:
            raise RuntimeError(f"Error saving payout: {str(e)}")

    async def delete(self, payout_key: str) -> bool:
        try:
            result = await self.payout_collection.delete_one({PayoutFields.PAYOUT_KEY: payout_key})
            return result.deleted_count > 0
        except Exception as e:
            raise RuntimeError(f"Error deleting payout: {str(e)}")

    def _document_to_payout(self, doc: Dict[str, Any]) -> Payout:
        return Payout(
            id=str(doc.get(PayoutFields.MONGO_ID)),
            payout_key=doc.get(PayoutFields.PAYOUT_KEY, ""),
            date=doc.get(PayoutFields.DATE),
            worker_count=doc.get(PayoutFields.WORKER_COUNT, 0),
            daily_wage=doc.get(PayoutFields.DAILY_WAGE, 0),
            status=doc.get(PayoutFields.STATUS, "approved"),
            created_at=doc.get(PayoutFields.CREATED_AT),
            updated_at=doc.get(PayoutFields.UPDATED_AT),
        )
