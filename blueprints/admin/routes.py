"""
Admin routes for user and role management.
Provides CRUD operations for users and roles and the role permission matrix.
"""

from flask import Blueprint, current_app, request

from blueprints.admin.services.role_service import (
    create_custom_role, update_custom_role, delete_custom_role,
    toggle_role_permission, get_permissions_matrix
)
from blueprints.admin.services.user_service import (
    create_admin_user, update_admin_user, filter_users, effective_permissions
)
from models.role import get_all_roles, get_role_by_id
from models.user import USER_STATUSES, get_all_users, get_user_by_id, delete_user
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES
from utils.permissions import APPLICATION_MODULES, CRUD_PERMISSIONS, count_permissions

admin_bp = Blueprint('admin', __name__)


@admin_bp.route('/dashboard')
def dashboard():
    """Admin summary statistics."""
    users = get_all_users()
    return api_success(data={
        'total_users': len(users),
        'active_users': len([u for u in users if u['status'] == 'Active']),
        'total_roles': len(get_all_roles()),
    })


@admin_bp.route('/modules')
def modules():
    """Module catalog the permission matrix is built on."""
    return api_success(data={'modules': APPLICATION_MODULES, 'actions': CRUD_PERMISSIONS})


# =============================================================================
# USERS
# =============================================================================

@admin_bp.route('/users')
def users():
    """List users. Query: role, status, search."""
    status = request.args.get('status', '')
    if status and status not in USER_STATUSES:
        return api_error(MESSAGES['invalid_filter'], field='status')

    return api_success(data=filter_users(
        role=request.args.get('role', ''),
        status=status,
        search=request.args.get('search', ''),
    ))


@admin_bp.route('/users/<user_id>')
def user_detail(user_id):
    user = get_user_by_id(user_id)
    if not user:
        return api_error(MESSAGES['user_not_found'], status=404)
    return api_success(data=user)


@admin_bp.route('/users', methods=['POST'])
def users_create():
    """Create new user."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    user, errors = create_admin_user(data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)

    current_app.logger.info(f'Admin: user {user["username"]} created')
    return api_success(data=user, message=MESSAGES['user_created'], status=201)


@admin_bp.route('/users/<user_id>', methods=['PUT'])
def users_edit(user_id):
    """Edit user."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    user, errors = update_admin_user(user_id, data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)
    if not user:
        return api_error(MESSAGES['user_not_found'], status=404)

    return api_success(data=user, message=MESSAGES['user_updated'])


@admin_bp.route('/users/<user_id>', methods=['DELETE'])
def users_delete(user_id):
    """Delete user."""
    if not delete_user(user_id):
        return api_error(MESSAGES['user_not_found'], status=404)

    current_app.logger.info(f'Admin: user {user_id} deleted')
    return api_success(message=MESSAGES['user_deleted'])


@admin_bp.route('/users/<user_id>/permissions')
def user_permissions(user_id):
    """Permission matrix the user holds through its role."""
    permissions = effective_permissions(user_id)
    if permissions is None:
        return api_error(MESSAGES['user_not_found'], status=404)
    return api_success(data=permissions)


# =============================================================================
# ROLES
# =============================================================================

@admin_bp.route('/roles')
def roles():
    """List roles with their permission count."""
    return api_success(data=[
        dict(role, permission_count=count_permissions(role['permissions']))
        for role in get_all_roles()
    ])


@admin_bp.route('/roles/<role_id>')
def role_detail(role_id):
    role = get_role_by_id(role_id)
    if not role:
        return api_error(MESSAGES['role_not_found'], status=404)
    return api_success(data=role)


@admin_bp.route('/roles', methods=['POST'])
def role_create():
    """Create role with an optional permission matrix."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    role, errors = create_custom_role(data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)

    return api_success(data=role, message=MESSAGES['role_created'], status=201)


@admin_bp.route('/roles/<role_id>', methods=['PUT'])
def role_edit(role_id):
    """Edit role name, description and (optionally) permissions."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    role, errors = update_custom_role(role_id, data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)
    if not role:
        return api_error(MESSAGES['role_not_found'], status=404)

    return api_success(data=role, message=MESSAGES['role_updated'])


@admin_bp.route('/roles/<role_id>', methods=['DELETE'])
def role_delete(role_id):
    """Delete role if no users are assigned to it."""
    deleted, error = delete_custom_role(role_id)
    if not deleted:
        status = 404 if error == 'role_not_found' else 409
        return api_error(MESSAGES[error], status=status)

    return api_success(message=MESSAGES['role_deleted'])


@admin_bp.route('/roles/<role_id>/matrix')
def role_matrix(role_id):
    """Permission grid for the role editor."""
    matrix = get_permissions_matrix(role_id)
    if matrix is None:
        return api_error(MESSAGES['role_not_found'], status=404)
    return api_success(data=matrix)


@admin_bp.route('/roles/<role_id>/permissions/toggle', methods=['POST'])
def role_permission_toggle(role_id):
    """Grant or revoke a single action. Body: module, section, action."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return api_error(MESSAGES['json_required'])

    role, error = toggle_role_permission(
        role_id, data.get('module'), data.get('section'), data.get('action')
    )
    if error:
        status = 404 if error == 'role_not_found' else 400
        return api_error(MESSAGES[error], status=status)

    return api_success(data=role['permissions'], message=MESSAGES['permission_toggled'])
