"""
Business-rule validation for reservation drafts.
Runs before any conflict check; the first violated rule is raised.
"""

from utils.datetime_helpers import parse_date
from utils.validators import validate_email
from .reservation_errors import (
    InvalidFacilityType, MissingFacilityUnit, UnknownFacilityUnit, InvalidDate,
    InvalidDateOrder, DurationTooLong, MissingContactInfo, InvalidContactInfo,
    PurposeTooShort, PurposeTooLong, SpecialRequestsTooLong
)
from .reservation_record import (
    FACILITY_TYPES, UNIT_SCOPED_TYPES, MAX_RESERVATION_DAYS, MIN_PURPOSE_LENGTH,
    MAX_TEXT_LENGTH, MIN_CONTACT_NAME_LENGTH, facility_units, normalize_facility_unit
)


def _clean_text(value) -> str:
    if value is None:
        return ''
    return str(value).strip()


def validate_facility(facility_type: str, facility_unit) -> tuple:
    """
    Validate a facility identity.

    Args:
        facility_type: One of FACILITY_TYPES
        facility_unit: Unit id (required for dorm and classroom)

    Returns:
        tuple: (facility_type, normalized facility_unit)

    Raises:
        InvalidFacilityType, MissingFacilityUnit, UnknownFacilityUnit
    """
    if facility_type not in FACILITY_TYPES:
        raise InvalidFacilityType()

    unit = normalize_facility_unit(facility_type, facility_unit)
    if facility_type in UNIT_SCOPED_TYPES:
        if unit is None:
            raise MissingFacilityUnit()
        if unit not in facility_units(facility_type):
            raise UnknownFacilityUnit(f'{unit} is not a valid {facility_type} unit')

    return facility_type, unit


def validate_stay(check_in, check_out) -> tuple:
    """
    Validate a check-in/check-out pair.

    Returns:
        tuple: (check_in date, check_out date)

    Raises:
        InvalidDate, InvalidDateOrder, DurationTooLong
    """
    try:
        start = parse_date(check_in)
    except ValueError:
        raise InvalidDate('A valid check-in date is required', field='check_in')
    try:
        end = parse_date(check_out)
    except ValueError:
        raise InvalidDate('A valid check-out date is required', field='check_out')

    if end <= start:
        raise InvalidDateOrder()

    if (end - start).days > MAX_RESERVATION_DAYS:
        raise DurationTooLong()

    return start, end


def validate_contact(draft) -> tuple:
    """
    Validate the contact pair required by the draft variant.

    Returns:
        tuple: (contact_name, contact_email)

    Raises:
        MissingContactInfo, InvalidContactInfo
    """
    name_field, email_field = draft.contact_fields
    name, email = (_clean_text(value) for value in draft.contact)

    if not name:
        raise MissingContactInfo(field=name_field)
    if not email:
        raise MissingContactInfo(field=email_field)

    if len(name) < MIN_CONTACT_NAME_LENGTH:
        raise InvalidContactInfo('Name must be at least 2 characters', field=name_field)
    if not validate_email(email):
        raise InvalidContactInfo('Invalid email address', field=email_field)

    return name, email


def validate_reservation_draft(draft) -> dict:
    """
    Validate a reservation draft against every booking rule.

    Args:
        draft: DormReservationDraft or FacilityReservationDraft

    Returns:
        dict: Cleaned values ready to build a Reservation

    Raises:
        ValidationError subclass describing the first failed rule
    """
    facility_type, facility_unit = validate_facility(draft.facility_type, draft.facility_unit)
    check_in, check_out = validate_stay(draft.check_in, draft.check_out)
    contact_name, contact_email = validate_contact(draft)

    purpose = _clean_text(draft.purpose)
    if len(purpose) < MIN_PURPOSE_LENGTH:
        raise PurposeTooShort()
    if len(purpose) > MAX_TEXT_LENGTH:
        raise PurposeTooLong()

    special_requests = _clean_text(draft.special_requests) or None
    if special_requests and len(special_requests) > MAX_TEXT_LENGTH:
        raise SpecialRequestsTooLong()

    return {
        'facility_type': facility_type,
        'facility_unit': facility_unit,
        'check_in': check_in,
        'check_out': check_out,
        'contact_name': contact_name,
        'contact_email': contact_email,
        'purpose': purpose,
        'special_requests': special_requests,
    }
