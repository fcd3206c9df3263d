"""
Facility reservation domain.

This module re-exports the split reservation modules:
- reservation_record.py: Constants, stored record and booking drafts
- reservation_errors.py: Failure taxonomy
- reservation_validation.py: Booking rule validation
- reservation_availability.py: Booked dates and conflict detection
- reservation_repository.py: Storage-backed and in-memory repositories
"""

# Records and drafts
from .reservation_record import (
    # Constants
    FACILITY_TYPES,
    FACILITY_TYPE_LABELS,
    UNIT_SCOPED_TYPES,
    DORM_ROOMS,
    CLASSROOMS,
    STATUS_ACTIVE,
    STATUS_COMPLETED,
    STATUS_CANCELLED,
    RESERVATION_STATUSES,
    MAX_RESERVATION_DAYS,
    # Helpers
    facility_units,
    facility_label,
    normalize_facility_unit,
    # Types
    Reservation,
    ReservationDraft,
    DormReservationDraft,
    FacilityReservationDraft,
    build_reservation_draft,
)

# Failures
from .reservation_errors import (
    ReservationError,
    ValidationError,
    InvalidFacilityType,
    MissingFacilityUnit,
    UnknownFacilityUnit,
    InvalidDate,
    InvalidDateOrder,
    DurationTooLong,
    MissingContactInfo,
    InvalidContactInfo,
    PurposeTooShort,
    PurposeTooLong,
    SpecialRequestsTooLong,
    ConflictError,
    NotFoundError,
    InvalidStatusTransition,
)

# Validation
from .reservation_validation import (
    validate_facility,
    validate_stay,
    validate_contact,
    validate_reservation_draft,
)

# Availability
from .reservation_availability import (
    matches_facility,
    active_for_facility,
    ranges_overlap,
    booked_dates,
    booked_dates_between,
    find_conflicts,
    has_conflict,
)

# Repositories
from .reservation_repository import (
    StorageReservationRepository,
    InMemoryReservationRepository,
)
