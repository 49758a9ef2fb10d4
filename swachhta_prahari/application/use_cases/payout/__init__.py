from .list_payouts import ListPayoutsUseCase
from .update_payout import UpdatePayoutUseCase
from .delete_payout import DeletePayoutUseCase

__all__ = [
    "ListPayoutsUseCase",
    "UpdatePayoutUseCase",
    "DeletePayoutUseCase",
]
