"""
Business logic for role and permission management.
Handles name validation, permission matrices and deletion rules.
"""

import logging

from blueprints.admin.forms import RoleForm
from models.role import (get_role_by_name, get_role_by_id, create_role, update_role,
                         delete_role, has_users)
from utils.api_response import form_errors
from utils.forms import bind_form
from utils.helpers import generate_unique_code, timestamp
from utils.messages import MESSAGES
from utils.permissions import (APPLICATION_MODULES, CRUD_PERMISSIONS, normalize_permissions,
                               toggle_permission, has_permission, count_permissions)

logger = logging.getLogger(__name__)


def validate_role_name(name: str, exclude_id: str = None) -> tuple:
    """
    Validate role name presence and uniqueness.

    Args:
        name: Role name
        exclude_id: Role ID to exclude from uniqueness check (for updates)

    Returns:
        Tuple of (is_valid, error_message_key)
    """
    if not name or not name.strip():
        return False, 'role_required'

    existing = get_role_by_name(name)
    if existing and (exclude_id is None or existing['id'] != exclude_id):
        return False, 'role_name_exists'

    return True, ''


def _validate_role(data: dict, exclude_id: str = None) -> tuple:
    """Returns (form, errors)."""
    form = bind_form(RoleForm, data)
    if not form.validate():
        return form, form_errors(form)

    is_valid, error = validate_role_name(form.name.data, exclude_id)
    if not is_valid:
        return form, {'name': MESSAGES[error]}

    return form, {}


def create_custom_role(data: dict) -> tuple:
    """
    Create a role from a name, description and permission matrix.

    Returns:
        Tuple of (role, errors)
    """
    form, errors = _validate_role(data)
    if errors:
        return None, errors

    role = create_role({
        'id': generate_unique_code('ROLE'),
        'name': form.name.data,
        'description': form.description.data or '',
        'permissions': normalize_permissions(data.get('permissions')),
        'created_at': timestamp(),
    })
    logger.info('Role %s created (%d permissions)', role['name'],
                count_permissions(role['permissions']))
    return role, {}


def update_custom_role(role_id: str, data: dict) -> tuple:
    """
    Update a role. The permission matrix is replaced only when supplied.

    Returns:
        Tuple of (role, errors); (None, {}) if the role does not exist
    """
    if not get_role_by_id(role_id):
        return None, {}

    form, errors = _validate_role(data, exclude_id=role_id)
    if errors:
        return None, errors

    fields = {'name': form.name.data, 'description': form.description.data or ''}
    if 'permissions' in data:
        fields['permissions'] = normalize_permissions(data.get('permissions'))

    return update_role(role_id, **fields), {}


def can_delete_role(role_id: str) -> tuple:
    """
    Check if a role can be deleted.

    Args:
        role_id: Role ID

    Returns:
        Tuple of (can_delete, error_message_key)
    """
    if not get_role_by_id(role_id):
        return False, 'role_not_found'

    if has_users(role_id):
        return False, 'role_has_users'

    return True, ''


def delete_custom_role(role_id: str) -> tuple:
    can_delete, error = can_delete_role(role_id)
    if not can_delete:
        return False, error

    delete_role(role_id)
    logger.info('Role %s deleted', role_id)
    return True, ''


def toggle_role_permission(role_id: str, module_id: str, section: str, action: str) -> tuple:
    """
    Grant or revoke one action on a module section of a role.

    Returns:
        Tuple of (role, error_message_key)
    """
    role = get_role_by_id(role_id)
    if not role:
        return None, 'role_not_found'

    try:
        permissions = toggle_permission(role['permissions'], module_id, section, action)
    except ValueError:
        return None, 'unknown_permission'

    return update_role(role_id, permissions=permissions), ''


def get_permissions_matrix(role_id: str) -> dict:
    """
    Build the permission matrix data for the UI.

    One row per module section, one column per CRUD action.

    Args:
        role_id: Role ID

    Returns:
        Dict with 'role', 'actions' and 'modules', or None if not found
    """
    role = get_role_by_id(role_id)
    if not role:
        return None

    matrix = role['permissions']
    modules = []
    for module in APPLICATION_MODULES:
        modules.append({
            'id': module['id'],
            'name': module['name'],
            'description': module['description'],
            'sections': [
                {
                    'name': section,
                    'actions': [
                        {'action': action,
                         'assigned': has_permission(matrix, module['id'], section, action)}
                        for action in CRUD_PERMISSIONS
                    ],
                }
                for section in module['sections']
            ],
        })

    return {
        'role': {'id': role['id'], 'name': role['name']},
        'actions': CRUD_PERMISSIONS,
        'modules': modules,
        'total_assigned': count_permissions(matrix),
    }
