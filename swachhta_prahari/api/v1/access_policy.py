"""
Role policy for protected actions.

Each named action lists the roles allowed to perform it. Controllers depend
on ``require_action(<name>)`` instead of checking roles inline.
"""

# Standard library imports
from typing import Callable, Dict, FrozenSet

# External package imports
from fastapi import Depends, HTTPException, status

# Local application imports
from ...application.dto.user_dto import UserResponse
from ...domain.constants import UserRole
from .dependencies import get_current_user

_ADMIN = UserRole.ADMIN.value
_ANY_ROLE = frozenset(role.value for role in UserRole)

ACCESS_POLICY: Dict[str, FrozenSet[str]] = {
    # Cameras
    "camera:create": frozenset({_ADMIN}),
    "camera:read": frozenset({_ADMIN, UserRole.CAMERA.value}),
    "camera:update": frozenset({_ADMIN}),
    "camera:restart": frozenset({_ADMIN}),
    "camera:upload_video": frozenset({_ADMIN, UserRole.CAMERA.value}),
    # Incidents
    "incident:create": frozenset({_ADMIN, UserRole.AI.value}),
    "incident:read": _ANY_ROLE,
    "incident:update": _ANY_ROLE,
    "incident:assign": frozenset({_ADMIN}),
    # AI
    "ai:read": _ANY_ROLE,
    "ai:configure": frozenset({_ADMIN}),
    # Reports
    "report:generate": frozenset({_ADMIN, UserRole.REPORTING.value}),
    "report:read": frozenset({_ADMIN, UserRole.REPORTING.value, UserRole.ANALYST.value}),
    # Payouts
    "payout:read": frozenset({_ADMIN, UserRole.PAYROLL.value}),
    "payout:update": frozenset({_ADMIN, UserRole.PAYROLL.value}),
    "payout:delete": frozenset({_ADMIN}),
    # Managers
    "manager:manage": frozenset({_ADMIN}),
    # Analytics
    "analytics:read": _ANY_ROLE,
}


def is_allowed(action: str, role: str) -> bool:
    return role in ACCESS_POLICY.get(action, frozenset())


def require_action(action: str) -> Callable:
    """
    Build a dependency that resolves the current user and enforces the policy

    Raises:
        KeyError: At import time if the action is not in the policy table
    """
    if action not in ACCESS_POLICY:
        raise KeyError(f"Unknown action: {action}")

    async def dependency(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
        if not is_allowed(action, current_user.role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied. Insufficient permissions."
            )
        return current_user

    return dependency
