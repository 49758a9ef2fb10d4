# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.payout_dto import PayoutUpdateRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.payout import (
    ListPayoutsUseCase,
    UpdatePayoutUseCase,
    DeletePayoutUseCase,
)
from ...domain.exceptions import PrahariError
from ...di.container import get_container
from .access_policy import require_action
from .responses import envelope, http_error


router = APIRouter(tags=["payouts"])


@router.get("")
async def list_payouts(
    current_user: UserResponse = Depends(require_action("payout:read")),
) -> dict:
    """List approved payouts, newest date first"""
    container = get_container()
    payouts = await container.get(ListPayoutsUseCase).execute()
    return envelope({"payouts": payouts})


@router.put("/{payout_id}")
async def update_payout(
    payout_id: str,
    request: PayoutUpdateRequest,
    current_user: UserResponse = Depends(require_action("payout:update")),
) -> dict:
    """
    Approve or withdraw a daily payout

    Only approved payouts are stored; pending or rejected removes any
    stored record and the response carries no payout.
    """
    container = get_container()
    update_payout_use_case = container.get(UpdatePayoutUseCase)

    try:
        payout = await update_payout_use_case.execute(payout_id, request, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    if payout is None:
        return envelope({"payout": None}, message="Payout removed")
    return envelope({"payout": payout}, message="Payout approved")


@router.delete("/{payout_id}")
async def delete_payout(
    payout_id: str,
    current_user: UserResponse = Depends(require_action("payout:delete")),
) -> dict:
    container = get_container()

    try:
        await container.get(DeletePayoutUseCase).execute(payout_id, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(message="Payout deleted successfully")
