# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.user_dto import ManagerUpdateRequest, UserResponse
from ...application.use_cases.manager import (
    ListManagersUseCase,
    UpdateManagerUseCase,
    ToggleManagerStatusUseCase,
    DeleteManagerUseCase,
)
from ...domain.exceptions import PrahariError
from ...di.container import get_container
from .access_policy import require_action
from .responses import envelope, http_error


router = APIRouter(tags=["admin"])


@router.get("/managers")
async def list_managers(
    current_user: UserResponse = Depends(require_action("manager:manage")),
) -> dict:
    container = get_container()
    managers = await container.get(ListManagersUseCase).execute()
    return envelope({"managers": managers})


@router.put("/managers/{manager_id}")
async def update_manager(
    manager_id: str,
    request: ManagerUpdateRequest,
    current_user: UserResponse = Depends(require_action("manager:manage")),
) -> dict:
    """
    Update a manager account

    Args:
        manager_id: Manager user ID
        request: Fields to change; a new password is re-hashed
        current_user: Current authenticated admin (from dependency)
    """
    container = get_container()
    update_manager_use_case = container.get(UpdateManagerUseCase)

    try:
        manager = await update_manager_use_case.execute(manager_id, request, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope({"manager": manager}, message="Manager updated successfully")


@router.patch("/managers/{manager_id}/toggle-status")
async def toggle_manager_status(
    manager_id: str,
    current_user: UserResponse = Depends(require_action("manager:manage")),
) -> dict:
    container = get_container()

    try:
        manager = await container.get(ToggleManagerStatusUseCase).execute(manager_id, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    state = "activated" if manager.is_active else "deactivated"
    return envelope({"manager": manager}, message=f"Manager {state} successfully")


@router.delete("/managers/{manager_id}")
async def delete_manager(
    manager_id: str,
    current_user: UserResponse = Depends(require_action("manager:manage")),
) -> dict:
    container = get_container()

    try:
        await container.get(DeleteManagerUseCase).execute(manager_id, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(message="Manager deleted successfully")
