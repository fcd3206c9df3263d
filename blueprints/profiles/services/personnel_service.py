"""
Business logic for personnel profiles.
Validation and persistence of the staff-entered profile registry.
"""

import logging

from blueprints.profiles.forms import PersonnelForm
from models.personnel import (DEFAULT_PERSONNEL_TYPE, get_personnel_by_id, create_personnel,
                              update_personnel, delete_personnel)
from models.profile import get_profile
from utils.api_response import form_errors
from utils.forms import bind_form
from utils.helpers import generate_unique_code, timestamp

logger = logging.getLogger(__name__)


def _validate(data: dict) -> tuple:
    values = dict(data)
    values.setdefault('profile_type', DEFAULT_PERSONNEL_TYPE)

    form = bind_form(PersonnelForm, values)
    if not form.validate():
        return None, form_errors(form)

    return {
        'first_name': form.first_name.data,
        'last_name': form.last_name.data,
        'email': form.email.data,
        'phone': form.phone.data,
        'profile_type': form.profile_type.data,
    }, {}


def create_personnel_profile(data: dict) -> tuple:
    """
    Create a personnel profile (type defaults to Cadet).

    Returns:
        Tuple of (profile, errors)
    """
    fields, errors = _validate(data)
    if errors:
        return None, errors

    profile = {'id': generate_unique_code('PROF')}
    profile.update(fields)
    profile['created_at'] = timestamp()

    create_personnel(profile)
    logger.info('Personnel profile %s created (%s)', profile['id'], profile['profile_type'])
    return profile, {}


def update_personnel_profile(profile_id: str, data: dict) -> tuple:
    """
    Replace the editable fields of a personnel profile.

    Returns:
        Tuple of (profile, errors, error_key). error_key is 'profile_not_found',
        or 'profile_read_only' for application and registration profiles.
    """
    if not get_personnel_by_id(profile_id):
        key = 'profile_read_only' if get_profile(profile_id) else 'profile_not_found'
        return None, {}, key

    fields, errors = _validate(data)
    if errors:
        return None, errors, ''

    return update_personnel(profile_id, **fields), {}, ''


def delete_personnel_profile(profile_id: str) -> tuple:
    """
    Delete a personnel profile.

    Rosters keep their participant entries; they were copied when the
    roster was saved.

    Returns:
        Tuple of (success, error_key)
    """
    if not get_personnel_by_id(profile_id):
        key = 'profile_read_only' if get_profile(profile_id) else 'profile_not_found'
        return False, key

    delete_personnel(profile_id)
    logger.info('Personnel profile %s deleted', profile_id)
    return True, ''
