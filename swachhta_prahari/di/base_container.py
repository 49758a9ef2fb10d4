# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal registry of singletons and factories keyed by type or name.

    Singletons are shared instances (collections, repositories, services).
    Factories build a fresh object on every ``get`` (use cases).
    """

    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}

    def register_singleton(self, key: Any, instance: Any) -> None:
        self._singletons[key] = instance

    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory

    def has(self, key: Any) -> bool:
        return key in self._singletons or key in self._factories

    def get(self, key: Any) -> Any:
        """
        Resolve a registered dependency

        Raises:
            ValueError: If nothing is registered under the key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", str(key))
        raise ValueError(f"Dependency not registered: {name}")
