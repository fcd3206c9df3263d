"""
Personnel profile model and data access functions.
Profiles entered by staff for people who book facilities or attend training.
"""

from .storage import PERSONNEL_KEY, load_collection, save_collection

PERSONNEL_TYPES = ['Applicant', 'Cadet', 'Trooper', 'Instructor', 'Administrator']
DEFAULT_PERSONNEL_TYPE = 'Cadet'


def get_all_personnel() -> list:
    return load_collection(PERSONNEL_KEY)


def get_personnel_by_id(profile_id: str) -> dict:
    """
    Get personnel profile by ID.

    Args:
        profile_id: Profile ID ('PROF-...')

    Returns:
        Profile dict or None if not found
    """
    for profile in get_all_personnel():
        if profile['id'] == profile_id:
            return profile
    return None


def create_personnel(record: dict) -> dict:
    profiles = get_all_personnel()
    profiles.append(record)
    save_collection(PERSONNEL_KEY, profiles)
    return record


def update_personnel(profile_id: str, **fields) -> dict:
    """
    Update personnel profile fields.

    Args:
        profile_id: Profile ID
        **fields: Fields to update (first_name, last_name, email, phone, profile_type)

    Returns:
        Updated profile dict or None if not found
    """
    allowed_fields = {'first_name', 'last_name', 'email', 'phone', 'profile_type'}
    updates = {k: v for k, v in fields.items() if k in allowed_fields}

    profiles = get_all_personnel()
    for profile in profiles:
        if profile['id'] == profile_id:
            profile.update(updates)
            save_collection(PERSONNEL_KEY, profiles)
            return profile
    return None


def delete_personnel(profile_id: str) -> bool:
    """Delete a personnel profile. Returns True if it existed."""
    profiles = get_all_personnel()
    remaining = [p for p in profiles if p['id'] != profile_id]
    if len(remaining) == len(profiles):
        return False
    save_collection(PERSONNEL_KEY, remaining)
    return True
