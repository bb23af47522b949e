from functools import lru_cache
import logging

from paddelup.core.config import GristConfig, settings
from paddelup.application.ports.booking_gateway import BookingGatewayPort
from paddelup.application.ports.record_store import RecordStorePort
from paddelup.application.ports.service_catalog import ServiceCatalogPort
from paddelup.application.use_cases.booking_wizard import BookingWizard
from paddelup.application.use_cases.forward_booking import ForwardBookingUseCase
from paddelup.infrastructure.booking.http_gateway import HttpBookingGateway
from paddelup.infrastructure.grist.grist_client import GristRecordStore
from paddelup.infrastructure.grist.mock_record_store import MockRecordStore
from paddelup.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore


logger = logging.getLogger(__name__)


def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore()


@lru_cache
def get_record_store() -> RecordStorePort:
    logger.info("GRIST_API_KEY present=%s", bool(settings.GRIST_API_KEY))
    logger.info("ENV=%s", settings.ENV)

    if not settings.GRIST_API_KEY:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockRecordStore (credential missing, ENV=dev/local)")
            return MockRecordStore()
        raise ValueError("GRIST_API_KEY is required to submit bookings.")

    logger.info("Using GristRecordStore")
    return GristRecordStore(config=GristConfig.from_settings(settings))


def get_forward_booking_use_case() -> ForwardBookingUseCase:
    return ForwardBookingUseCase(store=get_record_store())


def get_booking_gateway() -> BookingGatewayPort:
    return HttpBookingGateway(
        endpoint=settings.BOOKING_API_URL,
        timeout=settings.BOOKING_API_TIMEOUT_SECONDS,
    )


def get_booking_wizard() -> BookingWizard:
    return BookingWizard(gateway=get_booking_gateway(), catalog=get_service_catalog())
