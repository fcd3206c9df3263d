"""
Facility availability and conflict detection.

Pure functions over a reservation collection. Only active reservations
block a facility. Ranges are closed intervals: a reservation ending on a
day and another starting that same day conflict, so a facility is fully
vacated before it is handed over again.
"""

from .reservation_record import normalize_facility_unit


def matches_facility(reservation, facility_type: str, facility_unit=None) -> bool:
    """
    Check whether a reservation belongs to a facility identity.

    Without a unit (or for unit-less facility types) every reservation of
    the type matches.
    """
    if reservation.facility_type != facility_type:
        return False

    unit = normalize_facility_unit(facility_type, facility_unit)
    if unit is None:
        return True
    return reservation.facility_unit == unit


def active_for_facility(reservations, facility_type: str, facility_unit=None) -> list:
    """Active reservations of one facility identity."""
    return [
        r for r in reservations
        if r.is_active and matches_facility(r, facility_type, facility_unit)
    ]


def ranges_overlap(start_a, end_a, start_b, end_b) -> bool:
    """Closed-interval overlap: [a] and [b] share at least one day."""
    return start_a <= end_b and start_b <= end_a


def booked_dates(reservations, facility_type: str, facility_unit=None) -> list:
    """
    Every calendar day covered by an active reservation of the facility.

    Args:
        reservations: Full reservation collection
        facility_type: Facility type
        facility_unit: Optional unit (dorm room, classroom)

    Returns:
        list: Distinct dates in ascending order
    """
    days = set()
    for reservation in active_for_facility(reservations, facility_type, facility_unit):
        days.update(reservation.dates())
    return sorted(days)


def booked_dates_between(reservations, facility_type: str, facility_unit, start, end) -> list:
    """Booked dates of the facility clipped to the window [start, end]."""
    return [
        day for day in booked_dates(reservations, facility_type, facility_unit)
        if start <= day <= end
    ]


def find_conflicts(reservations, facility_type: str, facility_unit, check_in, check_out) -> list:
    """
    Active reservations of the facility overlapping [check_in, check_out].

    The caller guarantees check_in < check_out; the range is not reordered.

    Returns:
        list: Conflicting reservations ordered by check-in
    """
    conflicts = [
        r for r in active_for_facility(reservations, facility_type, facility_unit)
        if ranges_overlap(r.check_in, r.check_out, check_in, check_out)
    ]
    return sorted(conflicts, key=lambda r: (r.check_in, r.id))


def has_conflict(reservations, facility_type: str, facility_unit, check_in, check_out) -> bool:
    """True if any active reservation of the facility overlaps the range."""
    return bool(find_conflicts(reservations, facility_type, facility_unit, check_in, check_out))
