"""
Facility booking service.

Decides whether a reservation may be created for a facility and date
range, and derives the booked calendar days of a facility. Works against
any repository exposing load_reservations() / save_reservations().

Each operation reads the whole collection, checks it and writes it back
in one call. The module lock serializes these read-check-write cycles
between threads of one process; it does not coordinate separate
processes sharing the same database.
"""

import logging
import threading

from models.reservation import (
    STATUS_ACTIVE, STATUS_CANCELLED, STATUS_COMPLETED, Reservation, ReservationDraft,
    ConflictError, NotFoundError, InvalidStatusTransition, ValidationError,
    StorageReservationRepository, build_reservation_draft, validate_reservation_draft,
    booked_dates, booked_dates_between, find_conflicts
)
from utils.datetime_helpers import get_now, parse_date
from utils.helpers import generate_unique_code

logger = logging.getLogger(__name__)

_write_lock = threading.Lock()


def _new_reservation_id() -> str:
    return generate_unique_code('RES')


class ReservationService:
    """Booking rules, conflict checks and status changes for reservations."""

    def __init__(self, repository, clock=None, id_factory=None):
        """
        Args:
            repository: Object with load_reservations() and save_reservations(list)
            clock: Callable returning the creation timestamp (default: get_now)
            id_factory: Callable returning a new unique reservation id
        """
        self.repository = repository
        self.clock = clock or get_now
        self.id_factory = id_factory or _new_reservation_id

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get(self, reservation_id: str) -> Reservation:
        """Fetch one reservation (any status). Raises NotFoundError."""
        for reservation in self.repository.load_reservations():
            if reservation.id == reservation_id:
                return reservation
        raise NotFoundError(reservation_id)

    def list_reservations(self, status: str = None, facility_type: str = None,
                          needs_cleaning: bool = None) -> list:
        """
        List reservations with optional filters.

        Returns:
            list: Reservations ordered by check-in, then creation time
        """
        reservations = self.repository.load_reservations()

        if status:
            reservations = [r for r in reservations if r.status == status]
        if facility_type:
            reservations = [r for r in reservations if r.facility_type == facility_type]
        if needs_cleaning is not None:
            reservations = [r for r in reservations if r.needs_cleaning == needs_cleaning]

        return sorted(reservations, key=lambda r: (r.check_in, r.created_at.isoformat() if r.created_at else ''))

    def booked_dates(self, facility_type: str, facility_unit: str = None) -> list:
        """Ascending list of every day booked for the facility."""
        return booked_dates(self.repository.load_reservations(), facility_type, facility_unit)

    def availability(self, facility_type: str, facility_unit, start, end) -> list:
        """Booked days of the facility inside a display window (e.g. a calendar month)."""
        return booked_dates_between(
            self.repository.load_reservations(), facility_type, facility_unit,
            parse_date(start), parse_date(end)
        )

    def find_conflicts(self, facility_type: str, facility_unit, check_in, check_out) -> list:
        """Active reservations of the facility overlapping the range."""
        return find_conflicts(
            self.repository.load_reservations(), facility_type, facility_unit,
            parse_date(check_in), parse_date(check_out)
        )

    def has_conflict(self, facility_type: str, facility_unit, check_in, check_out) -> bool:
        """True if the range overlaps an active reservation of the facility."""
        return bool(self.find_conflicts(facility_type, facility_unit, check_in, check_out))

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def validate_and_create(self, draft) -> Reservation:
        """
        Validate a booking and store it if the facility is free.

        The conflict check always runs against the collection as stored at
        submission time, whatever the calendar showed earlier.

        Args:
            draft: ReservationDraft variant, or a raw form dict

        Returns:
            Reservation: The created record

        Raises:
            ValidationError: A booking rule failed
            ConflictError: The facility is booked on some of the days
        """
        if not isinstance(draft, ReservationDraft):
            draft = build_reservation_draft(draft)

        try:
            cleaned = validate_reservation_draft(draft)
        except ValidationError as e:
            logger.debug('Reservation draft rejected: %s (%s)', e.code, e.field)
            raise

        with _write_lock:
            reservations = self.repository.load_reservations()

            conflicts = find_conflicts(
                reservations, cleaned['facility_type'], cleaned['facility_unit'],
                cleaned['check_in'], cleaned['check_out']
            )
            if conflicts:
                blocked = booked_dates_between(
                    reservations, cleaned['facility_type'], cleaned['facility_unit'],
                    cleaned['check_in'], cleaned['check_out']
                )
                logger.info(
                    'Booking conflict for %s %s (%s to %s) with %s',
                    cleaned['facility_type'], cleaned['facility_unit'] or '-',
                    cleaned['check_in'], cleaned['check_out'],
                    ', '.join(r.id for r in conflicts)
                )
                raise ConflictError(conflicts, blocked)

            reservation = Reservation(
                id=self.id_factory(),
                status=STATUS_ACTIVE,
                needs_cleaning=False,
                created_at=self.clock(),
                **cleaned
            )
            reservations.append(reservation)
            self.repository.save_reservations(reservations)

        logger.info('Reservation %s created for %s (%s to %s)', reservation.id,
                    reservation.facility_label, reservation.check_in, reservation.check_out)
        return reservation

    def _update(self, reservation_id: str, change):
        """Apply `change` to one stored reservation and persist the collection."""
        with _write_lock:
            reservations = self.repository.load_reservations()

            for index, reservation in enumerate(reservations):
                if reservation.id == reservation_id:
                    break
            else:
                raise NotFoundError(reservation_id)

            updated = change(reservation)
            if updated != reservation:
                reservations[index] = updated
                self.repository.save_reservations(reservations)
            return updated

    def cancel(self, reservation_id: str) -> Reservation:
        """
        Cancel a reservation.

        Cancelling an active reservation flags the facility for cleaning;
        cancelling an already cancelled or completed one leaves the flag as is.
        """
        def change(reservation):
            return reservation.copy(
                status=STATUS_CANCELLED,
                needs_cleaning=reservation.needs_cleaning or reservation.status == STATUS_ACTIVE,
            )

        updated = self._update(reservation_id, change)
        logger.info('Reservation %s cancelled (needs cleaning: %s)', reservation_id,
                    updated.needs_cleaning)
        return updated

    def complete(self, reservation_id: str) -> Reservation:
        """Mark an active reservation as completed (operator action)."""
        def change(reservation):
            if reservation.status != STATUS_ACTIVE:
                raise InvalidStatusTransition(
                    f'Only active reservations can be completed (current: {reservation.status})'
                )
            return reservation.copy(status=STATUS_COMPLETED)

        updated = self._update(reservation_id, change)
        logger.info('Reservation %s completed', reservation_id)
        return updated

    def mark_needs_cleaning(self, reservation_id: str) -> Reservation:
        """Flag the reserved facility for cleaning, whatever the status."""
        return self._update(reservation_id, lambda r: r.copy(needs_cleaning=True))


def get_reservation_service() -> ReservationService:
    """Service bound to the application storage (needs an app context)."""
    return ReservationService(StorageReservationRepository())
