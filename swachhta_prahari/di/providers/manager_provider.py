from typing import TYPE_CHECKING
from ...domain.repositories import UserRepository
from ...application.use_cases.manager import (
    ListManagersUseCase,
    UpdateManagerUseCase,
    ToggleManagerStatusUseCase,
    DeleteManagerUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ManagerProvider:
    """Admin-only manager account use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (
            ListManagersUseCase,
            UpdateManagerUseCase,
            ToggleManagerStatusUseCase,
            DeleteManagerUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(user_repository=container.get(UserRepository))
            )
