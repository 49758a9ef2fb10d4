# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    ServiceProvider,
    AuthProvider,
    CameraProvider,
    IncidentProvider,
    DetectionProvider,
    ReportProvider,
    PayoutProvider,
    ManagerProvider,
    AnalyticsProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (ServiceProvider) - realtime relay, mail, storage, report writer
    4. Use cases - depend on repositories and services
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        ServiceProvider.register(self)

        AuthProvider.register(self)
        CameraProvider.register(self)
        IncidentProvider.register(self)
        DetectionProvider.register(self)
        ReportProvider.register(self)
        PayoutProvider.register(self)
        ManagerProvider.register(self)
        AnalyticsProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
