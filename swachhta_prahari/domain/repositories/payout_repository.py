from abc import ABC, abstractmethod
from typing import Optional, List

from ..models.payout import Payout


class PayoutRepository(ABC):
    """Repository interface - defines contract for payout data access"""

    @abstractmethod
    async def list_all(self) -> List[Payout]:
        """All stored payouts, newest date first"""
        pass

    @abstractmethod
    async def find_by_key(self, payout_key: str) -> Optional[Payout]:
        pass

    @abstractmethod
    async def upsert(self, payout: Payout) -> Payout:
        """Create or replace the payout stored under its key"""
        pass

    @abstractmethod
    async def delete(self, payout_key: str) -> bool:
        """Delete payout; returns False when nothing was stored"""
        pass
