"""Facility booking services package."""

from blueprints.facilities.services.reservation_service import (  # noqa: F401
    ReservationService,
    get_reservation_service,
)
