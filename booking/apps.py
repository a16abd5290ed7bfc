import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class BookingConfig(AppConfig):
    """Builds the process-wide booking facade once, at startup."""

    name = "booking"
    verbose_name = "Ticket booking"

    def ready(self) -> None:
        from booking.services.booking_facade import BookingFacade
        from booking.services.preload import SeedLoader

        self.facade = BookingFacade.build()
        seed_dir = settings.BOOKING["SEED_DIR"]
        if seed_dir:
            self.facade.preload(SeedLoader(seed_dir))
        else:
            logger.info("BOOKING_SEED_DIR is empty, starting without seed data")
