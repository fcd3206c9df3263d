"""
Facility reservation records and drafts.

A stored Reservation always carries a normalized contact pair. Drafts,
as submitted by the booking form, are a tagged union discriminated by
facility type: dorm bookings name a guest, every other facility names
the responsible instructor.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from utils.datetime_helpers import date_range, parse_date


# =============================================================================
# CONSTANTS
# =============================================================================

FACILITY_DORM = 'dorm'
FACILITY_CLASSROOM = 'classroom'

FACILITY_TYPES = (
    'dorm', 'classroom', 'range', 'amphitheater', 'auditorium', 'gym', 'pool', 'other'
)

FACILITY_TYPE_LABELS = {
    'dorm': 'Dorm Room',
    'classroom': 'Classroom',
    'range': 'Range',
    'amphitheater': 'Amphitheater',
    'auditorium': 'Auditorium',
    'gym': 'Gym',
    'pool': 'Pool',
    'other': 'Other',
}

# Facility types booked per numbered unit; all others are one shared instance
UNIT_SCOPED_TYPES = frozenset({FACILITY_DORM, FACILITY_CLASSROOM})

DORM_ROOMS = tuple(str(i).zfill(3) for i in range(1, 301))
CLASSROOMS = tuple(f'CR-{i}' for i in range(1, 13))

STATUS_ACTIVE = 'active'
STATUS_COMPLETED = 'completed'
STATUS_CANCELLED = 'cancelled'
RESERVATION_STATUSES = (STATUS_ACTIVE, STATUS_COMPLETED, STATUS_CANCELLED)

MAX_RESERVATION_DAYS = 180
MIN_PURPOSE_LENGTH = 10
MAX_TEXT_LENGTH = 500
MIN_CONTACT_NAME_LENGTH = 2


def facility_units(facility_type: str) -> tuple:
    """Bookable unit identifiers for a facility type (empty if unit-less)."""
    if facility_type == FACILITY_DORM:
        return DORM_ROOMS
    if facility_type == FACILITY_CLASSROOM:
        return CLASSROOMS
    return ()


def normalize_facility_unit(facility_type: str, facility_unit) -> Optional[str]:
    """
    Normalize the unit half of a facility identity.

    Unit-less facility types always resolve to None; blank units become None.
    """
    if facility_type not in UNIT_SCOPED_TYPES:
        return None
    if facility_unit is None:
        return None
    unit = str(facility_unit).strip()
    return unit or None


def facility_label(facility_type: str, facility_unit: Optional[str] = None) -> str:
    """Display name such as 'Dorm Room 101' or 'Range'."""
    label = FACILITY_TYPE_LABELS.get(facility_type, facility_type)
    return f'{label} {facility_unit}' if facility_unit else label


# =============================================================================
# STORED RECORD
# =============================================================================

@dataclass
class Reservation:
    """A persisted facility reservation."""

    id: str
    facility_type: str
    facility_unit: Optional[str]
    contact_name: str
    contact_email: str
    check_in: date
    check_out: date
    purpose: str
    special_requests: Optional[str] = None
    status: str = STATUS_ACTIVE
    needs_cleaning: bool = False
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @property
    def facility_label(self) -> str:
        return facility_label(self.facility_type, self.facility_unit)

    def dates(self) -> list:
        """Every calendar day covered, check-in and check-out inclusive."""
        return date_range(self.check_in, self.check_out)

    def copy(self, **changes) -> 'Reservation':
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Persisted shape (camelCase keys, ISO dates)."""
        return {
            'id': self.id,
            'facilityType': self.facility_type,
            'facilityUnit': self.facility_unit,
            'contactName': self.contact_name,
            'contactEmail': self.contact_email,
            'checkIn': self.check_in.isoformat(),
            'checkOut': self.check_out.isoformat(),
            'purpose': self.purpose,
            'specialRequests': self.special_requests,
            'status': self.status,
            'needsCleaning': self.needs_cleaning,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Reservation':
        """
        Build a record from its persisted shape.

        Older records stored full ISO datetimes for checkIn/checkOut and may
        lack needsCleaning; both are tolerated.
        """
        created_at = data.get('createdAt')
        return cls(
            id=data['id'],
            facility_type=data['facilityType'],
            facility_unit=normalize_facility_unit(data['facilityType'], data.get('facilityUnit')),
            contact_name=data.get('contactName') or '',
            contact_email=data.get('contactEmail') or '',
            check_in=parse_date(data['checkIn']),
            check_out=parse_date(data['checkOut']),
            purpose=data.get('purpose') or '',
            special_requests=data.get('specialRequests'),
            status=data.get('status', STATUS_ACTIVE),
            needs_cleaning=bool(data.get('needsCleaning', False)),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )


# =============================================================================
# DRAFTS (booking form input)
# =============================================================================

@dataclass
class ReservationDraft(ABC):
    """Fields shared by every booking form submission. Dates are raw input."""

    facility_type: str = ''
    facility_unit: Optional[str] = None
    check_in: object = None
    check_out: object = None
    purpose: str = ''
    special_requests: Optional[str] = None

    contact_fields = ()

    @property
    @abstractmethod
    def contact(self) -> tuple:
        """(name, email) of the person responsible for the booking."""


@dataclass
class DormReservationDraft(ReservationDraft):
    """Dorm booking: the guest staying in the room is the contact."""

    guest_name: Optional[str] = None
    guest_email: Optional[str] = None

    contact_fields = ('guest_name', 'guest_email')

    @property
    def contact(self) -> tuple:
        return self.guest_name, self.guest_email


@dataclass
class FacilityReservationDraft(ReservationDraft):
    """Any non-dorm booking: the responsible instructor is the contact."""

    instructor_name: Optional[str] = None
    instructor_email: Optional[str] = None

    contact_fields = ('instructor_name', 'instructor_email')

    @property
    def contact(self) -> tuple:
        return self.instructor_name, self.instructor_email


_DRAFT_KEYS = {
    'facility_type': ('facility_type', 'facilityType'),
    'facility_unit': ('facility_unit', 'facilityUnit', 'facilityNumber'),
    'check_in': ('check_in', 'checkIn'),
    'check_out': ('check_out', 'checkOut'),
    'purpose': ('purpose',),
    'special_requests': ('special_requests', 'specialRequests'),
    'guest_name': ('guest_name', 'guestName'),
    'guest_email': ('guest_email', 'guestEmail'),
    'instructor_name': ('instructor_name', 'instructorName'),
    'instructor_email': ('instructor_email', 'instructorEmail'),
}


def _pick(data: dict, name: str):
    for key in _DRAFT_KEYS[name]:
        if data.get(key) is not None:
            return data[key]
    return None


def build_reservation_draft(data: dict) -> ReservationDraft:
    """
    Build the draft variant matching the submitted facility type.

    Accepts snake_case or camelCase form keys. Contact fields of the other
    variant are ignored.

    Args:
        data: Raw form/JSON payload

    Returns:
        DormReservationDraft or FacilityReservationDraft
    """
    data = data or {}
    facility_type = _pick(data, 'facility_type') or ''
    if isinstance(facility_type, str):
        facility_type = facility_type.strip().lower()

    common = {
        'facility_type': facility_type,
        'facility_unit': _pick(data, 'facility_unit'),
        'check_in': _pick(data, 'check_in'),
        'check_out': _pick(data, 'check_out'),
        'purpose': _pick(data, 'purpose') or '',
        'special_requests': _pick(data, 'special_requests'),
    }

    if facility_type == FACILITY_DORM:
        return DormReservationDraft(
            guest_name=_pick(data, 'guest_name'),
            guest_email=_pick(data, 'guest_email'),
            **common,
        )

    return FacilityReservationDraft(
        instructor_name=_pick(data, 'instructor_name'),
        instructor_email=_pick(data, 'instructor_email'),
        **common,
    )
