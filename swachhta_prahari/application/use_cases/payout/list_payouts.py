from typing import List

from ....domain.repositories.payout_repository import PayoutRepository
from ...dto.payout_dto import PayoutResponse


class ListPayoutsUseCase:
    """List stored payouts, newest date first"""

    def __init__(self, payout_repository: PayoutRepository) -> None:
        self.payout_repository = payout_repository

    async def execute(self) -> List[PayoutResponse]:
        payouts = await self.payout_repository.list_all()
        return [PayoutResponse.from_domain(payout) for payout in payouts]
