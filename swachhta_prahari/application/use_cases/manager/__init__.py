from .list_managers import ListManagersUseCase
from .update_manager import UpdateManagerUseCase
from .toggle_manager_status import ToggleManagerStatusUseCase
from .delete_manager import DeleteManagerUseCase

__all__ = [
    "ListManagersUseCase",
    "UpdateManagerUseCase",
    "ToggleManagerStatusUseCase",
    "DeleteManagerUseCase",
]
