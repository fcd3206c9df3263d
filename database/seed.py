"""
Seed documents written when the storage is reset.
"""

import json

from utils.permissions import full_permissions, grant_module

ROLES_STORAGE_KEY = 'admin_roles'


def default_roles() -> list:
    """Built-in roles: administrators, instructors and applicants."""
    instructor = grant_module({}, 'training-records')
    instructor = grant_module(instructor, 'facility-booking')

    applicant = grant_module({}, 'new-application', ['Create', 'Read'])
    applicant = grant_module(applicant, 'track-application', ['Create', 'Read'])

    return [
        {
            'id': 'role-admin',
            'name': 'Administrator',
            'description': 'Full access to all modules',
            'permissions': full_permissions(),
        },
        {
            'id': 'role-instructor',
            'name': 'Instructor',
            'description': 'Access to training and facility modules',
            'permissions': instructor,
        },
        {
            'id': 'role-applicant',
            'name': 'Applicant',
            'description': 'Limited access for applicants',
            'permissions': applicant,
        },
    ]


def seed_database(db):
    """Store the default roles."""
    db.execute(
        'INSERT OR REPLACE INTO app_storage (storage_key, payload) VALUES (?, ?)',
        (ROLES_STORAGE_KEY, json.dumps(default_roles()))
    )
