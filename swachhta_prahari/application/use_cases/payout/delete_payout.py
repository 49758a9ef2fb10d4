import logging

from ....domain.repositories.payout_repository import PayoutRepository
from ....domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeletePayoutUseCase:
    def __init__(self, payout_repository: PayoutRepository) -> None:
        self.payout_repository = payout_repository

    async def execute(self, payout_key: str, user_id: str) -> None:
        if not await self.payout_repository.delete(payout_key):
            raise NotFoundError("Payout not found")
        logger.info(f"Payout {payout_key} deleted by user: {user_id}")
