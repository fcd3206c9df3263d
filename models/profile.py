"""
Profile directory.
Merge of submitted applications, user registrations and personnel profiles.
Only personnel profiles are edited directly (see models/personnel.py).
"""

from .application import get_all_applications
from .personnel import get_all_personnel
from .registration import get_all_registrations

PROFILE_APPLICATION = 'application'
PROFILE_REGISTRATION = 'registration'
PROFILE_PERSONNEL = 'personnel'
PROFILE_TYPES = ['all', PROFILE_APPLICATION, PROFILE_REGISTRATION, PROFILE_PERSONNEL]

SEARCH_FIELDS = ['first_name', 'last_name', 'email', 'id', 'current_employer']


def _from_application(application: dict) -> dict:
    profile = dict(application)
    profile['type'] = PROFILE_APPLICATION
    return profile


def _from_registration(registration: dict) -> dict:
    profile = dict(registration)
    profile['type'] = PROFILE_REGISTRATION
    profile['submitted_at'] = registration.get('registered_at')
    return profile


def _from_personnel(person: dict) -> dict:
    profile = dict(person)
    profile['type'] = PROFILE_PERSONNEL
    profile['submitted_at'] = person.get('created_at')
    return profile


def get_all_profiles() -> list:
    """
    Every application, registration and personnel profile, newest first.

    Returns:
        List of profile dicts carrying 'type' and 'submitted_at'
    """
    profiles = [_from_application(a) for a in get_all_applications()]
    profiles.extend(_from_registration(r) for r in get_all_registrations())
    profiles.extend(_from_personnel(p) for p in get_all_personnel())
    return sorted(profiles, key=lambda p: p.get('submitted_at') or '', reverse=True)


def filter_profiles(profiles: list, profile_type: str = 'all', search: str = '') -> list:
    """
    Filter profiles by type and a case-insensitive search term.

    Args:
        profiles: Profiles to filter
        profile_type: 'all' or one profile type
        search: Substring matched against names, email, id and employer
    """
    if profile_type and profile_type != 'all':
        profiles = [p for p in profiles if p['type'] == profile_type]

    term = (search or '').strip().lower()
    if term:
        profiles = [
            p for p in profiles
            if any(term in str(p.get(field) or '').lower() for field in SEARCH_FIELDS)
        ]

    return profiles


def search_profiles(profile_type: str = 'all', search: str = '') -> list:
    return filter_profiles(get_all_profiles(), profile_type, search)


def get_profile(profile_id: str) -> dict:
    """Get profile by application, registration or personnel id, or None."""
    for profile in get_all_profiles():
        if profile['id'] == profile_id:
            return profile
    return None


def get_profile_counts() -> dict:
    """Totals per profile type."""
    applications = len(get_all_applications())
    registrations = len(get_all_registrations())
    personnel = len(get_all_personnel())
    return {
        'all': applications + registrations + personnel,
        PROFILE_APPLICATION: applications,
        PROFILE_REGISTRATION: registrations,
        PROFILE_PERSONNEL: personnel,
    }


def full_name(profile: dict) -> str:
    """First, middle, last name and suffix, skipping blanks."""
    parts = [profile.get(key) for key in ('first_name', 'middle_name', 'last_name', 'suffix')]
    return ' '.join(part.strip() for part in parts if part and part.strip())
