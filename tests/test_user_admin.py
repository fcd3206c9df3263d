"""
Tests for administered users.
"""

import pytest

from blueprints.admin.services.user_service import (
    create_admin_user, update_admin_user, filter_users, effective_permissions
)
from models.role import get_role_by_name
from utils.permissions import full_permissions


def user_data(role_id, **overrides):
    data = {
        'username': 'jsmith',
        'email': 'jsmith@example.com',
        'full_name': 'John Smith',
        'cell_number': '(717) 555-0100',
        'role': role_id,
        'status': 'Active',
    }
    data.update(overrides)
    return data


@pytest.fixture
def admin_role_id(app):
    return get_role_by_name('Administrator')['id']


@pytest.fixture
def user(admin_role_id):
    record, errors = create_admin_user(user_data(admin_role_id))
    assert errors == {}
    return record


class TestUserService:

    def test_create(self, user, admin_role_id):
        assert user['id'].startswith('USER-')
        assert user['role'] == admin_role_id
        assert user['created_at']

    def test_field_validation(self, admin_role_id):
        record, errors = create_admin_user(user_data(admin_role_id, username='js',
                                                     email='nope', full_name='J',
                                                     cell_number='555-0100', status='Away'))

        assert record is None
        assert set(errors) == {'username', 'email', 'full_name', 'cell_number', 'status'}

    def test_unique_username_and_email(self, user, admin_role_id):
        _, errors = create_admin_user(user_data(admin_role_id, username='JSMITH',
                                                email='JSmith@example.com'))

        assert errors == {'username': 'Username already exists', 'email': 'Email already exists'}

    def test_role_must_exist(self, app):
        _, errors = create_admin_user(user_data('role-missing'))

        assert errors == {'role': 'Role not found'}

    def test_update_self_keeps_unique_values(self, user, admin_role_id):
        record, errors = update_admin_user(user['id'], user_data(admin_role_id,
                                                                 full_name='John Q. Smith'))

        assert errors == {}
        assert record['full_name'] == 'John Q. Smith'

    def test_update_unknown_user(self, admin_role_id):
        assert update_admin_user('USER-missing', user_data(admin_role_id)) == (None, {})

    def test_filters(self, user, admin_role_id):
        applicant_id = get_role_by_name('Applicant')['id']
        create_admin_user(user_data(applicant_id, username='mlee', email='mlee@example.com',
                                    full_name='Mary Lee', status='Inactive'))

        assert [u['username'] for u in filter_users(role=applicant_id)] == ['mlee']
        assert [u['username'] for u in filter_users(status='Active')] == ['jsmith']
        assert [u['username'] for u in filter_users(search='MARY')] == ['mlee']

    def test_effective_permissions(self, user, admin_role_id):
        assert effective_permissions(user['id']) == full_permissions()

        update_admin_user(user['id'], user_data(admin_role_id, status='Inactive'))
        assert effective_permissions(user['id']) == {}
        assert effective_permissions('USER-missing') is None


class TestUserRoutes:

    def test_crud(self, client, admin_role_id):
        response = client.post('/admin/users', json=user_data(admin_role_id))
        assert response.status_code == 201
        user_id = response.get_json()['data']['id']

        response = client.get('/admin/users?search=smith')
        assert [u['id'] for u in response.get_json()['data']] == [user_id]

        response = client.get(f'/admin/users/{user_id}/permissions')
        assert response.get_json()['data'] == full_permissions()

        assert client.delete(f'/admin/users/{user_id}').status_code == 200
        assert client.get(f'/admin/users/{user_id}').status_code == 404

    def test_invalid_status_filter(self, client):
        assert client.get('/admin/users?status=Away').status_code == 400

    def test_dashboard(self, client, user):
        data = client.get('/admin/dashboard').get_json()['data']

        assert data == {'total_users': 1, 'active_users': 1, 'total_roles': 3}
