# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.time_utils import to_naive_utc
from ....domain.repositories.payout_repository import PayoutRepository
from ....domain.models.payout import Payout
from ....domain.constants import PayoutStatus
from ...dto.payout_dto import PayoutUpdateRequest, PayoutResponse

logger = logging.getLogger(__name__)


class UpdatePayoutUseCase:
    """
    Approve, reject or reset a payout.

    Only approved payouts are persisted: approving upserts the record kept
    under the client's key, any other status removes it.
    """

    def __init__(self, payout_repository: PayoutRepository) -> None:
        self.payout_repository = payout_repository

    async def execute(self, payout_key: str, request: PayoutUpdateRequest, user_id: str) -> Optional[PayoutResponse]:
        """
        Returns:
            The stored payout when approved, None when nothing is stored
        """
        if request.status != PayoutStatus.APPROVED:
            removed = await self.payout_repository.delete(payout_key)
            logger.info(
                f"Payout {payout_key} marked {request.status.value} by user: {user_id}"
                f"{' (stored record removed)' if removed else ''}"
            )
            return None

        payout = await self.payout_repository.upsert(
            Payout(
                id=None,
                payout_key=payout_key,
                date=to_naive_utc(request.date),
                worker_count=request.worker_count,
                daily_wage=request.daily_wage,
                status=PayoutStatus.APPROVED.value,
            )
        )
        logger.info(f"Payout {payout_key} approved by user: {user_id}")
        return PayoutResponse.from_domain(payout)
