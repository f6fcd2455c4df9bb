from dependency_injector import containers, providers

from stubsweep.core.domain.models import DUPLICATE_GROUPS


class Container(containers.DeclarativeContainer):
    """DI container for core components."""

    @staticmethod
    def _create_cleanup_service(groups, **kwargs):
        from .services.cleanup_service import CleanupService

        return CleanupService(groups=groups, **kwargs)

    catalog = providers.Object(DUPLICATE_GROUPS)

    cleanup_service = providers.Factory(_create_cleanup_service, groups=catalog)
