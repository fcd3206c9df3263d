"""
Facility booking routes.
Reservation CRUD, availability calendar data and cleaning workflow.
"""

from flask import Blueprint, current_app, request

from blueprints.facilities.services.reservation_service import get_reservation_service
from models.reservation import (
    FACILITY_TYPES, FACILITY_TYPE_LABELS, RESERVATION_STATUSES, UNIT_SCOPED_TYPES,
    ReservationError, facility_units
)
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES

facilities_bp = Blueprint('facilities', __name__)


def _reservation_error(error: ReservationError) -> tuple:
    """Translate a reservation failure into an API error response."""
    extra = error.to_dict()
    extra.pop('message')
    return api_error(error.message, status=error.status, **extra)


def _parse_bool(value):
    if value is None or value == '':
        return None
    return value.lower() in ('1', 'true', 'yes')


# =============================================================================
# CATALOG & AVAILABILITY
# =============================================================================

@facilities_bp.route('/catalog')
def catalog():
    """Facility types and their bookable units."""
    return api_success(data=[{
        'type': facility_type,
        'label': FACILITY_TYPE_LABELS[facility_type],
        'unit_scoped': facility_type in UNIT_SCOPED_TYPES,
        'units': list(facility_units(facility_type)),
    } for facility_type in FACILITY_TYPES])


@facilities_bp.route('/booked-dates')
def booked_dates():
    """
    Booked days for a facility, for rendering a disabled-date calendar.

    Query: facility_type (required), facility_unit, start, end (optional window)
    """
    facility_type = request.args.get('facility_type', '')
    facility_unit = request.args.get('facility_unit') or None
    start = request.args.get('start')
    end = request.args.get('end')

    if facility_type not in FACILITY_TYPES:
        return api_error('Please select a valid facility type', field='facility_type')

    service = get_reservation_service()
    try:
        if start and end:
            days = service.availability(facility_type, facility_unit, start, end)
        else:
            days = service.booked_dates(facility_type, facility_unit)
    except ValueError:
        return api_error('Invalid date window', field='start')

    return api_success(data={
        'facility_type': facility_type,
        'facility_unit': facility_unit,
        'dates': [day.isoformat() for day in days],
    })


@facilities_bp.route('/check-availability', methods=['POST'])
def check_availability():
    """Check a candidate range against existing active reservations."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    facility_type = data.get('facility_type')
    if facility_type not in FACILITY_TYPES:
        return api_error('Please select a valid facility type', field='facility_type')

    facility_unit = data.get('facility_unit')
    service = get_reservation_service()
    try:
        conflicts = service.find_conflicts(
            facility_type, facility_unit, data.get('check_in'), data.get('check_out')
        )
        blocked = service.availability(
            facility_type, facility_unit, data.get('check_in'), data.get('check_out')
        )
    except ValueError:
        return api_error('Check-in and check-out dates are required', field='check_in')

    return api_success(data={
        'available': not conflicts,
        'conflicts': [r.to_dict() for r in conflicts],
        'blocked_dates': [day.isoformat() for day in blocked],
    })


# =============================================================================
# RESERVATIONS
# =============================================================================

@facilities_bp.route('/reservations')
def reservations_list():
    """List reservations. Query: status, facility_type, needs_cleaning."""
    status = request.args.get('status') or None
    facility_type = request.args.get('facility_type') or None

    if status and status not in RESERVATION_STATUSES:
        return api_error(MESSAGES['invalid_filter'], field='status')
    if facility_type and facility_type not in FACILITY_TYPES:
        return api_error(MESSAGES['invalid_filter'], field='facility_type')

    reservations = get_reservation_service().list_reservations(
        status=status,
        facility_type=facility_type,
        needs_cleaning=_parse_bool(request.args.get('needs_cleaning')),
    )
    return api_success(data=[r.to_dict() for r in reservations])


@facilities_bp.route('/reservations/<reservation_id>')
def reservation_detail(reservation_id):
    """Get one reservation."""
    try:
        reservation = get_reservation_service().get(reservation_id)
    except ReservationError as e:
        return _reservation_error(e)
    return api_success(data=reservation.to_dict())


@facilities_bp.route('/reservations', methods=['POST'])
def reservations_create():
    """Validate and create a reservation."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    try:
        reservation = get_reservation_service().validate_and_create(data)
    except ReservationError as e:
        current_app.logger.info(f'Reservation rejected: {e.code}')
        return _reservation_error(e)

    return api_success(data=reservation.to_dict(), message=MESSAGES['reservation_created'],
                       status=201)


@facilities_bp.route('/reservations/<reservation_id>/cancel', methods=['POST'])
def reservation_cancel(reservation_id):
    """Cancel a reservation."""
    try:
        reservation = get_reservation_service().cancel(reservation_id)
    except ReservationError as e:
        return _reservation_error(e)
    return api_success(data=reservation.to_dict(), message=MESSAGES['reservation_cancelled'])


@facilities_bp.route('/reservations/<reservation_id>/complete', methods=['POST'])
def reservation_complete(reservation_id):
    """Mark an active reservation as completed."""
    try:
        reservation = get_reservation_service().complete(reservation_id)
    except ReservationError as e:
        return _reservation_error(e)
    return api_success(data=reservation.to_dict(), message=MESSAGES['reservation_completed'])


@facilities_bp.route('/reservations/<reservation_id>/cleaning', methods=['POST'])
def reservation_cleaning(reservation_id):
    """Flag the reserved facility for cleaning."""
    try:
        reservation = get_reservation_service().mark_needs_cleaning(reservation_id)
    except ReservationError as e:
        return _reservation_error(e)
    return api_success(data=reservation.to_dict(), message=MESSAGES['reservation_cleaning'])
