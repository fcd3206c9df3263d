"""
Facility reservation failures.

Every failure leaves stored reservations untouched. Routes map `status`
to the HTTP status code and `code` to the error key sent to the client.
"""


class ReservationError(Exception):
    """Base class for reservation failures."""

    code = 'reservation_error'
    status = 400
    default_message = 'Reservation request failed'
    default_field = None

    def __init__(self, message: str = None, field: str = None):
        self.message = message or self.default_message
        self.field = field or self.default_field
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {'code': self.code, 'field': self.field, 'message': self.message}


# =============================================================================
# VALIDATION
# =============================================================================

class ValidationError(ReservationError):
    """Draft rejected before any conflict check or persistence."""

    code = 'validation_error'
    default_message = 'Invalid reservation'


class InvalidFacilityType(ValidationError):
    code = 'invalid_facility_type'
    default_message = 'Please select a valid facility type'
    default_field = 'facility_type'


class MissingFacilityUnit(ValidationError):
    code = 'missing_facility_unit'
    default_message = 'Please select a room or classroom number'
    default_field = 'facility_unit'


class UnknownFacilityUnit(ValidationError):
    code = 'unknown_facility_unit'
    default_message = 'Selected room or classroom does not exist'
    default_field = 'facility_unit'


class InvalidDate(ValidationError):
    code = 'invalid_date'
    default_message = 'Check-in and check-out dates are required'
    default_field = 'check_in'


class InvalidDateOrder(ValidationError):
    code = 'invalid_date_order'
    default_message = 'Check-out must be after check-in'
    default_field = 'check_out'


class DurationTooLong(ValidationError):
    code = 'duration_too_long'
    default_message = 'Reservation cannot exceed 6 months'
    default_field = 'check_out'


class MissingContactInfo(ValidationError):
    code = 'missing_contact_info'
    default_message = 'Contact name and email are required'


class InvalidContactInfo(MissingContactInfo):
    """Contact pair present but malformed."""

    code = 'invalid_contact_info'
    default_message = 'Contact name or email is invalid'


class PurposeTooShort(ValidationError):
    code = 'purpose_too_short'
    default_message = 'Purpose must be at least 10 characters'
    default_field = 'purpose'


class PurposeTooLong(ValidationError):
    code = 'purpose_too_long'
    default_message = 'Purpose must not exceed 500 characters'
    default_field = 'purpose'


class SpecialRequestsTooLong(ValidationError):
    code = 'special_requests_too_long'
    default_message = 'Special requests must not exceed 500 characters'
    default_field = 'special_requests'


# =============================================================================
# CONFLICT / LOOKUP / STATE
# =============================================================================

class ConflictError(ReservationError):
    """Candidate range overlaps an active reservation of the same facility."""

    code = 'reservation_conflict'
    status = 409
    default_message = 'The facility is already booked for some of the selected dates'

    def __init__(self, conflicts: list, blocked_dates: list, message: str = None):
        self.conflicts = conflicts
        self.blocked_dates = blocked_dates
        super().__init__(message)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['conflicts'] = [r.id for r in self.conflicts]
        data['blocked_dates'] = [d.isoformat() for d in self.blocked_dates]
        return data


class NotFoundError(ReservationError):
    code = 'reservation_not_found'
    status = 404
    default_message = 'Reservation not found'

    def __init__(self, reservation_id: str):
        self.reservation_id = reservation_id
        super().__init__(f'Reservation {reservation_id} not found')


class InvalidStatusTransition(ReservationError):
    code = 'invalid_status_transition'
    status = 409
    default_message = 'Reservation status cannot be changed'
