"""
Tests for training classes, scheduling and rosters.
"""

import pytest

from blueprints.training.services.training_service import (
    create_training_class, update_training_class, delete_training_class, add_materials,
    remove_material, schedule_class, update_scheduled_class, set_participants,
    remove_participant
)
from models.scheduled_class import get_schedule_by_id
from models.storage import APPLICATIONS_KEY, PERSONNEL_KEY, save_collection
from models.training_class import duration_display, get_class_by_id


def class_data(**overrides):
    data = {
        'name': 'Defensive Tactics',
        'description': 'Hands-on defensive tactics fundamentals.',
        'duration': 3,
        'duration_type': 'days',
        'prerequisites': 'First Aid, CPR , ',
        'requires_dorm_room': True,
    }
    data.update(overrides)
    return data


@pytest.fixture
def training_class(app):
    record, errors = create_training_class(class_data())
    assert errors == {}
    return record


@pytest.fixture
def scheduled(training_class):
    record, errors = schedule_class({'class_id': training_class['id'],
                                     'facility_type': 'classroom', 'max_attendees': 2})
    assert errors == {}
    return record


class TestClasses:

    def test_create(self, training_class):
        assert training_class['prerequisites'] == ['First Aid', 'CPR']
        assert training_class['requires_dorm_room'] is True
        assert training_class['materials'] == []
        assert duration_display(training_class) == '3 days'

    def test_singular_duration(self):
        assert duration_display({'duration': 1, 'duration_type': 'hours'}) == '1 hour'

    def test_validation(self, app):
        record, errors = create_training_class(class_data(name='AB', duration=0,
                                                          duration_type='months'))

        assert record is None
        assert set(errors) == {'name', 'duration', 'duration_type'}

    def test_unchecked_dorm_room(self, app):
        record, _ = create_training_class(class_data(requires_dorm_room=False))

        assert record['requires_dorm_room'] is False

    def test_update_renames_schedules(self, training_class, scheduled):
        record, errors = update_training_class(training_class['id'],
                                               class_data(name='Advanced Tactics'))

        assert errors == {}
        assert record['name'] == 'Advanced Tactics'
        assert get_schedule_by_id(scheduled['id'])['class_name'] == 'Advanced Tactics'

    def test_delete_refused_while_scheduled(self, training_class, scheduled):
        assert delete_training_class(training_class['id']) == (False, 'class_has_schedules')

    def test_delete(self, training_class):
        assert delete_training_class(training_class['id']) == (True, '')
        assert get_class_by_id(training_class['id']) is None


class TestMaterials:

    def test_add_and_remove(self, training_class):
        added, error = add_materials(training_class['id'], [
            {'name': 'syllabus.pdf', 'type': 'application/pdf', 'size': 2621440},
            {'name': 'notes.txt', 'size': 0},
        ])

        assert error == ''
        assert [m['size'] for m in added] == ['2.5 MB', '0 Bytes']
        assert added[1]['type'] == 'application/octet-stream'

        assert remove_material(training_class['id'], added[0]['id']) == (True, '')
        materials = get_class_by_id(training_class['id'])['materials']
        assert [m['name'] for m in materials] == ['notes.txt']

    def test_remove_unknown_material(self, training_class):
        assert remove_material(training_class['id'], 'MAT-x') == (False, 'material_not_found')


class TestSchedules:

    def test_schedule_requires_existing_class(self, app):
        record, errors = schedule_class({'class_id': 'CLS-missing', 'facility_type': 'gym',
                                         'max_attendees': 5})

        assert record is None
        assert errors == {'class_id': 'Selected class not found'}

    def test_max_attendees_bounds(self, training_class):
        _, errors = schedule_class({'class_id': training_class['id'], 'facility_type': 'gym',
                                    'max_attendees': 101})

        assert 'max_attendees' in errors

    def test_roster(self, app, scheduled):
        save_collection(APPLICATIONS_KEY, [
            {'id': 'PSP-1', 'first_name': 'Jane', 'last_name': 'Doe',
             'email': 'jane@example.com', 'submitted_at': '2025-01-01T00:00:00'},
        ])

        record, error = set_participants(scheduled['id'], ['PSP-1', 'PSP-ghost'])

        assert error == ''
        assert record['participants'] == [
            {'id': 'PSP-1', 'name': 'Jane Doe', 'email': 'jane@example.com', 'type': 'application'},
            {'id': 'PSP-ghost', 'name': 'Unknown', 'email': '', 'type': ''},
        ]

    def test_roster_includes_personnel_profiles(self, scheduled):
        save_collection(PERSONNEL_KEY, [
            {'id': 'PROF-1', 'first_name': 'Sam', 'last_name': 'Reyes', 'email': 'sam@example.com',
             'phone': '717-555-0111', 'profile_type': 'Trooper',
             'created_at': '2025-01-01T00:00:00-05:00'},
        ])

        record, error = set_participants(scheduled['id'], ['PROF-1'])

        assert error == ''
        assert record['participants'] == [
            {'id': 'PROF-1', 'name': 'Sam Reyes', 'email': 'sam@example.com', 'type': 'personnel'},
        ]

    def test_roster_full(self, scheduled):
        _, error = set_participants(scheduled['id'], ['a', 'b', 'c'])

        assert error == 'roster_full'
        assert get_schedule_by_id(scheduled['id'])['participants'] == []

    def test_capacity_cannot_drop_below_roster(self, training_class, scheduled):
        set_participants(scheduled['id'], ['a', 'b'])

        record, errors = update_scheduled_class(scheduled['id'], {
            'class_id': training_class['id'], 'facility_type': 'classroom', 'max_attendees': 1,
        })

        assert record is None
        assert 'max_attendees' in errors

    def test_remove_participant(self, scheduled):
        set_participants(scheduled['id'], ['a', 'b'])

        record, error = remove_participant(scheduled['id'], 'a')

        assert error == ''
        assert [p['id'] for p in record['participants']] == ['b']
        assert remove_participant(scheduled['id'], 'a') == (None, 'participant_not_found')


class TestTrainingRoutes:

    def test_class_crud(self, client):
        response = client.post('/training/classes', json=class_data())
        assert response.status_code == 201
        class_id = response.get_json()['data']['id']
        assert response.get_json()['data']['duration_display'] == '3 days'

        response = client.put(f'/training/classes/{class_id}', json=class_data(duration=1,
                                                                               duration_type='weeks'))
        assert response.get_json()['data']['duration_display'] == '1 week'

        assert client.delete(f'/training/classes/{class_id}').status_code == 200
        assert client.get(f'/training/classes/{class_id}').status_code == 404

    def test_delete_scheduled_class_conflict(self, client, training_class, scheduled):
        response = client.delete(f"/training/classes/{training_class['id']}")

        assert response.status_code == 409

    def test_participants_route_roster_full(self, client, scheduled):
        response = client.put(f"/training/schedules/{scheduled['id']}/participants",
                              json={'profile_ids': ['a', 'b', 'c']})

        assert response.status_code == 409
        assert response.get_json()['error'] == 'Cannot add more than 2 participants'

    def test_upload_materials_json(self, client, training_class):
        response = client.post(f"/training/classes/{training_class['id']}/materials",
                               json={'files': [{'name': 'map.png', 'type': 'image/png',
                                                'size': 1536}]})

        assert response.status_code == 201
        assert response.get_json()['data'][0]['size'] == '1.5 KB'
