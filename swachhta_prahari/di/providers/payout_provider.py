from typing import TYPE_CHECKING
from ...domain.repositories import PayoutRepository
from ...application.use_cases.payout import (
    ListPayoutsUseCase,
    UpdatePayoutUseCase,
    DeletePayoutUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PayoutProvider:
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListPayoutsUseCase,
            lambda: ListPayoutsUseCase(payout_repository=container.get(PayoutRepository))
        )
        container.register_factory(
            UpdatePayoutUseCase,
            lambda: UpdatePayoutUseCase(payout_repository=container.get(PayoutRepository))
        )
        container.register_factory(
            DeletePayoutUseCase,
            lambda: DeletePayoutUseCase(payout_repository=container.get(PayoutRepository))
        )
