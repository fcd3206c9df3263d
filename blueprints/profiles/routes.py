"""
Profile directory routes.
Listing covers every profile type; personnel profiles are also created,
edited and deleted here.
"""

from flask import Blueprint, current_app, request

from blueprints.profiles.services import (create_personnel_profile, update_personnel_profile,
                                          delete_personnel_profile)
from models.profile import PROFILE_TYPES, search_profiles, get_profile, get_profile_counts, full_name
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES

profiles_bp = Blueprint('profiles', __name__)


def _with_display_name(profile: dict) -> dict:
    return dict(profile, full_name=full_name(profile))


def _lookup_error(error: str) -> tuple:
    status = 409 if error == 'profile_read_only' else 404
    return api_error(MESSAGES[error], status=status)


@profiles_bp.route('/')
def profiles_list():
    """List profiles. Query: type (all/application/registration/personnel), search."""
    profile_type = request.args.get('type', 'all')
    search = request.args.get('search', '')

    if profile_type not in PROFILE_TYPES:
        return api_error(MESSAGES['invalid_filter'], field='type')

    profiles = search_profiles(profile_type, search)
    return api_success(data=[_with_display_name(p) for p in profiles],
                       counts=get_profile_counts())


@profiles_bp.route('/<profile_id>')
def profile_detail(profile_id):
    """Get one profile."""
    profile = get_profile(profile_id)
    if not profile:
        return api_error(MESSAGES['profile_not_found'], status=404)
    return api_success(data=_with_display_name(profile))


@profiles_bp.route('/', methods=['POST'])
def personnel_create():
    """Create a personnel profile."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    profile, errors = create_personnel_profile(data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)

    current_app.logger.info(f'Personnel profile created: {profile["id"]}')
    return api_success(data=_with_display_name(get_profile(profile['id'])),
                       message=MESSAGES['profile_created'], status=201)


@profiles_bp.route('/<profile_id>', methods=['PUT'])
def personnel_edit(profile_id):
    """Edit a personnel profile."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    profile, errors, error = update_personnel_profile(profile_id, data)
    if error:
        return _lookup_error(error)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)

    return api_success(data=_with_display_name(get_profile(profile['id'])),
                       message=MESSAGES['profile_updated'])


@profiles_bp.route('/<profile_id>', methods=['DELETE'])
def personnel_delete(profile_id):
    """Delete a personnel profile."""
    deleted, error = delete_personnel_profile(profile_id)
    if not deleted:
        return _lookup_error(error)
    return api_success(message=MESSAGES['profile_deleted'])
