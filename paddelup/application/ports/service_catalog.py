from __future__ import annotations

from abc import ABC, abstractmethod

from paddelup.domain.entities.service_catalog import ServiceOption


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_services(self) -> list[ServiceOption]:
        """List bookable services in display order."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service: str) -> ServiceOption | None:
        """Get the option for an exact service value, or None if it is not offered."""
        raise NotImplementedError
