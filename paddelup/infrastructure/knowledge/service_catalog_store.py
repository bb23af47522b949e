from __future__ import annotations

from paddelup.application.ports.service_catalog import ServiceCatalogPort
from paddelup.domain.entities.service_catalog import ServiceOption
from paddelup.infrastructure.knowledge.service_catalog_data import SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, catalog: dict[str, ServiceOption] | None = None) -> None:
        self._catalog = catalog or SERVICE_CATALOG

    def list_services(self) -> list[ServiceOption]:
        return list(self._catalog.values())

    def get_service(self, service: str) -> ServiceOption | None:
        return self._catalog.get(service)
