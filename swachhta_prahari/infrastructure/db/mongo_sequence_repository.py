# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

# Local application imports
from ...domain.repositories.sequence_repository import SequenceRepository
from ...domain.constants import CounterFields
from .mongo_connection import get_counter_collection


class MongoSequenceRepository(SequenceRepository):
    """Counters backed by a single document per name, bumped with $inc"""

    def __init__(self, counter_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.counter_collection = counter_collection if counter_collection is not None else get_counter_collection()

    async def next_value(self, name: str) -> int:
        try:
            doc = await self.counter_collection.find_one_and_update(
                {CounterFields.MONGO_ID: name},
                {"$inc": {CounterFields.SEQ: 1}},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
            return int(doc[CounterFields.SEQ])
        except Exception as e:
            raise RuntimeError(f"Error advancing counter '{name}': {str(e)}")
