"""
Role permission matrix helpers.

A role's permissions are a nested matrix keyed by application module and
section, holding the CRUD actions granted on that section:

    {'facility-booking': {'Book Facility': ['Create', 'Read']}}

All helpers are pure and return new matrices; callers persist the result.
"""

import copy

CRUD_PERMISSIONS = ['Create', 'Read', 'Update', 'Delete']

APPLICATION_MODULES = [
    {
        'id': 'new-application',
        'name': 'New Application',
        'description': 'Submit new PSP applications',
        'sections': ['Personal Information', 'Address Information', 'Contact Information'],
    },
    {
        'id': 'track-application',
        'name': 'Track Application',
        'description': 'Track application status',
        'sections': ['View Status', 'Download Documents'],
    },
    {
        'id': 'user-registration',
        'name': 'User Registration',
        'description': 'Register new users',
        'sections': ['Personal Information', 'Contact Information', 'Address Information',
                     'Employment Information'],
    },
    {
        'id': 'profiles',
        'name': 'Profiles',
        'description': 'Manage user profiles',
        'sections': ['View All Profiles', 'View Applications', 'View Registrations', 'View Details'],
    },
    {
        'id': 'facility-booking',
        'name': 'Facility Booking',
        'description': 'Book and manage facilities',
        'sections': ['Book Facility', 'Manage Reservations', 'Calendar View'],
    },
    {
        'id': 'training-records',
        'name': 'Training Records',
        'description': 'Manage training classes',
        'sections': ['Create Class', 'View Classes', 'Schedule Class', 'Manage Participants'],
    },
    {
        'id': 'user-administration',
        'name': 'User Administration',
        'description': 'Manage users and permissions',
        'sections': ['Manage Users', 'Manage Roles', 'Assign Permissions'],
    },
]

_MODULE_SECTIONS = {m['id']: m['sections'] for m in APPLICATION_MODULES}


def is_known_permission(module_id: str, section: str, action: str) -> bool:
    """Check that a (module, section, action) triple exists in the catalog."""
    sections = _MODULE_SECTIONS.get(module_id)
    return bool(sections) and section in sections and action in CRUD_PERMISSIONS


def normalize_permissions(matrix: dict) -> dict:
    """
    Clean a permission matrix received from a client.

    Drops unknown modules, sections and actions, removes duplicates,
    orders actions canonically and prunes empty sections/modules.

    Args:
        matrix: Raw nested permission dict (may be None)

    Returns:
        Normalized matrix
    """
    normalized = {}
    if not isinstance(matrix, dict):
        return normalized

    for module_id, sections in matrix.items():
        if module_id not in _MODULE_SECTIONS or not isinstance(sections, dict):
            continue
        for section, actions in sections.items():
            if section not in _MODULE_SECTIONS[module_id] or not isinstance(actions, (list, tuple)):
                continue
            granted = [a for a in CRUD_PERMISSIONS if a in actions]
            if granted:
                normalized.setdefault(module_id, {})[section] = granted

    return normalized


def toggle_permission(matrix: dict, module_id: str, section: str, action: str) -> dict:
    """
    Grant or revoke a single action on a module section.

    Args:
        matrix: Current permission matrix
        module_id: Module id from APPLICATION_MODULES
        section: Section name of that module
        action: One of CRUD_PERMISSIONS

    Returns:
        New matrix with the action flipped

    Raises:
        ValueError: If the triple is not part of the catalog
    """
    if not is_known_permission(module_id, section, action):
        raise ValueError(f'Unknown permission {module_id}/{section}/{action}')

    updated = copy.deepcopy(matrix or {})
    actions = updated.setdefault(module_id, {}).setdefault(section, [])

    if action in actions:
        updated[module_id][section] = [a for a in actions if a != action]
    else:
        updated[module_id][section] = actions + [action]

    return normalize_permissions(updated)


def has_permission(matrix: dict, module_id: str, section: str, action: str) -> bool:
    """Check whether the matrix grants an action on a module section."""
    if not matrix:
        return False
    return action in matrix.get(module_id, {}).get(section, [])


def grant_module(matrix: dict, module_id: str, actions: list = None) -> dict:
    """Grant actions (default: all CRUD) on every section of a module."""
    updated = copy.deepcopy(matrix or {})
    for section in _MODULE_SECTIONS[module_id]:
        updated.setdefault(module_id, {})[section] = list(actions or CRUD_PERMISSIONS)
    return normalize_permissions(updated)


def full_permissions() -> dict:
    """Matrix granting every action on every section of every module."""
    matrix = {}
    for module in APPLICATION_MODULES:
        matrix = grant_module(matrix, module['id'])
    return matrix


def count_permissions(matrix: dict) -> int:
    """Total number of granted actions in a matrix."""
    return sum(
        len(actions)
        for sections in (matrix or {}).values()
        for actions in sections.values()
    )
