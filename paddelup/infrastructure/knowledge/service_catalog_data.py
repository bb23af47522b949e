from __future__ import annotations

from paddelup.domain.entities.service_catalog import ServiceOption


SERVICE_CATALOG: dict[str, ServiceOption] = {
    option.service: option
    for option in (
        ServiceOption(service="1 hour without training", price=20),
        ServiceOption(service="1 hour with training", price=35),
        ServiceOption(service="1 hour with training and suivi", price=45),
    )
}
