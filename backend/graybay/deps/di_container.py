"""
Dependency injection container using dependency-injector.
Wires settings, the database handle, and the stateless services and controllers.
"""

from dependency_injector import containers, providers

from graybay.controllers.auth_controller import AuthController
from graybay.controllers.document_controller import DocumentController
from graybay.controllers.health_controller import HealthController
from graybay.core.config import settings
from graybay.db.session import Database
from graybay.services.auth_service import AuthService
from graybay.services.document_service import DocumentService
from graybay.services.health_service import HealthService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # One persistence handle per process; sessions are opened per request
    database = providers.Singleton(
        Database,
        url=config.database_url,
        echo=config.database_echo,
        pool_size=config.database_pool_size,
        max_overflow=config.database_max_overflow,
    )

    # Services
    health_service = providers.Singleton(
        HealthService,
    )

    auth_service = providers.Singleton(
        AuthService,
    )

    document_service = providers.Singleton(
        DocumentService,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )

    auth_controller = providers.Factory(
        AuthController,
        auth_service=auth_service,
    )

    document_controller = providers.Factory(
        DocumentController,
        document_service=document_service,
    )


def build_container() -> Container:
    """Create a container configured from settings."""
    container = Container()
    container.config.from_dict({
        "database_url": settings.DATABASE_URL,
        "database_echo": settings.DATABASE_ECHO,
        "database_pool_size": settings.DATABASE_POOL_SIZE,
        "database_max_overflow": settings.DATABASE_MAX_OVERFLOW,
    })
    return container


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = build_container()
    return _container
