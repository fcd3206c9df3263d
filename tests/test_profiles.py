"""
Tests for the profile directory.
"""

import re

import pytest

from blueprints.profiles.services import (create_personnel_profile, update_personnel_profile,
                                          delete_personnel_profile)
from models.personnel import get_all_personnel
from models.profile import (filter_profiles, full_name, get_all_profiles, get_profile,
                            get_profile_counts)
from models.storage import APPLICATIONS_KEY, REGISTRATIONS_KEY, save_collection


@pytest.fixture
def stored_profiles(app):
    save_collection(APPLICATIONS_KEY, [
        {'id': 'PSP-1', 'first_name': 'Jane', 'middle_name': '', 'last_name': 'Doe',
         'suffix': '', 'email': 'jane@example.com', 'status': 'Submitted',
         'submitted_at': '2025-01-02T10:00:00-05:00'},
        {'id': 'PSP-2', 'first_name': 'Ana', 'middle_name': 'Maria', 'last_name': 'Lopez',
         'suffix': 'Jr.', 'email': 'ana@example.com', 'status': 'Approved',
         'submitted_at': '2025-01-05T10:00:00-05:00'},
    ])
    save_collection(REGISTRATIONS_KEY, [
        {'id': 'USR-1', 'first_name': 'John', 'middle_name': '', 'last_name': 'Smith',
         'suffix': '', 'email': 'john@example.com', 'current_employer': 'Keystone Security',
         'status': 'Registered', 'registered_at': '2025-01-03T10:00:00-05:00'},
    ])


class TestProfileDirectory:

    def test_merged_newest_first(self, stored_profiles):
        profiles = get_all_profiles()

        assert [p['id'] for p in profiles] == ['PSP-2', 'USR-1', 'PSP-1']
        assert profiles[1]['type'] == 'registration'
        assert profiles[1]['submitted_at'] == '2025-01-03T10:00:00-05:00'

    def test_filter_by_type(self, stored_profiles):
        profiles = filter_profiles(get_all_profiles(), 'application')

        assert {p['id'] for p in profiles} == {'PSP-1', 'PSP-2'}

    @pytest.mark.parametrize('term,expected', [
        ('doe', ['PSP-1']),
        ('KEYSTONE', ['USR-1']),
        ('usr-', ['USR-1']),
        ('example.com', ['PSP-2', 'USR-1', 'PSP-1']),
        ('nobody', []),
    ])
    def test_search(self, stored_profiles, term, expected):
        profiles = filter_profiles(get_all_profiles(), 'all', term)

        assert [p['id'] for p in profiles] == expected

    def test_counts(self, stored_profiles):
        assert get_profile_counts() == {'all': 3, 'application': 2, 'registration': 1,
                                        'personnel': 0}

    def test_get_profile(self, stored_profiles):
        assert get_profile('USR-1')['first_name'] == 'John'
        assert get_profile('missing') is None

    def test_full_name_skips_blanks(self):
        assert full_name({'first_name': 'Ana', 'middle_name': 'Maria', 'last_name': 'Lopez',
                          'suffix': 'Jr.'}) == 'Ana Maria Lopez Jr.'
        assert full_name({'first_name': 'Jane', 'middle_name': ' ', 'last_name': 'Doe'}) == 'Jane Doe'


class TestProfileRoutes:

    def test_list_with_counts(self, client, stored_profiles):
        response = client.get('/profiles/?type=registration')
        body = response.get_json()

        assert [p['id'] for p in body['data']] == ['USR-1']
        assert body['data'][0]['full_name'] == 'John Smith'
        assert body['counts']['all'] == 3

    def test_invalid_type(self, client):
        assert client.get('/profiles/?type=staff').status_code == 400

    def test_detail_not_found(self, client):
        assert client.get('/profiles/PSP-404').status_code == 404


def personnel(**overrides):
    data = {
        'first_name': 'Sam',
        'last_name': 'Reyes',
        'email': 'sam.reyes@example.com',
        'phone': '(717) 555-0111',
        'profile_type': 'Trooper',
    }
    data.update(overrides)
    return data


class TestPersonnelProfiles:

    def test_create_assigns_prof_id(self, app):
        profile, errors = create_personnel_profile(personnel())

        assert errors == {}
        assert re.fullmatch(r'PROF-\d+-[A-Z0-9]{9}', profile['id'])
        assert profile['created_at']
        assert get_all_personnel() == [profile]

    def test_type_defaults_to_cadet(self, app):
        data = personnel()
        del data['profile_type']

        profile, _ = create_personnel_profile(data)

        assert profile['profile_type'] == 'Cadet'

    @pytest.mark.parametrize('field,value', [
        ('first_name', 'S'),
        ('last_name', ''),
        ('email', 'not-an-email'),
        ('phone', '555-0111'),
        ('profile_type', 'Sheriff'),
    ])
    def test_validation(self, app, field, value):
        profile, errors = create_personnel_profile(personnel(**{field: value}))

        assert profile is None
        assert field in errors

    def test_listed_in_directory(self, stored_profiles):
        profile, _ = create_personnel_profile(personnel())

        profiles = filter_profiles(get_all_profiles(), 'personnel')

        assert [p['id'] for p in profiles] == [profile['id']]
        assert profiles[0]['submitted_at'] == profile['created_at']
        assert get_profile_counts()['all'] == 4

    def test_update(self, app):
        profile, _ = create_personnel_profile(personnel())

        updated, errors, error = update_personnel_profile(
            profile['id'], personnel(profile_type='Instructor', email='sreyes@example.com'))

        assert (errors, error) == ({}, '')
        assert updated['profile_type'] == 'Instructor'
        assert updated['created_at'] == profile['created_at']

    def test_application_profiles_are_read_only(self, stored_profiles):
        assert update_personnel_profile('PSP-1', personnel()) == (None, {}, 'profile_read_only')
        assert delete_personnel_profile('PSP-1') == (False, 'profile_read_only')
        assert delete_personnel_profile('PROF-missing') == (False, 'profile_not_found')

    def test_delete(self, app):
        profile, _ = create_personnel_profile(personnel())

        assert delete_personnel_profile(profile['id']) == (True, '')
        assert get_all_personnel() == []


class TestPersonnelRoutes:

    def test_create_edit_delete(self, client):
        response = client.post('/profiles/', json=personnel())
        assert response.status_code == 201
        created = response.get_json()['data']
        assert created['type'] == 'personnel'
        assert created['full_name'] == 'Sam Reyes'

        response = client.put(f'/profiles/{created["id"]}', json=personnel(last_name='Rivera'))
        assert response.status_code == 200
        assert response.get_json()['data']['full_name'] == 'Sam Rivera'

        response = client.delete(f'/profiles/{created["id"]}')
        assert response.status_code == 200
        assert client.get(f'/profiles/{created["id"]}').status_code == 404

    def test_create_validation_errors(self, client):
        response = client.post('/profiles/', json=personnel(phone='12345'))
        body = response.get_json()

        assert response.status_code == 400
        assert body['errors']['phone'] == 'Invalid phone number format'

    def test_edit_application_profile_conflict(self, client, stored_profiles):
        response = client.put('/profiles/PSP-1', json=personnel())

        assert response.status_code == 409

    def test_delete_unknown(self, client):
        assert client.delete('/profiles/PROF-404').status_code == 404
