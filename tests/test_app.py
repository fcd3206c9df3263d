"""
Test application factory, error handlers and CLI commands.
"""

import pytest
from app import create_app
from config import ProductionConfig


class TestAppFactory:
    """Test Flask application factory."""

    def test_create_app_development(self):
        """Test app creation with development config."""
        app = create_app('development')
        assert app.config['DEBUG'] is True
        assert app.config['TESTING'] is False

    def test_create_app_test(self):
        """Test app creation with test config."""
        app = create_app('test')
        assert app.config['TESTING'] is True
        assert app.config['WTF_CSRF_ENABLED'] is False

    def test_app_has_blueprints(self):
        """Test that all module blueprints are registered."""
        app = create_app('test')

        assert set(app.blueprints) == {'facilities', 'intake', 'profiles', 'training', 'admin'}

    def test_production_requires_secret(self, monkeypatch):
        monkeypatch.delenv('SECRET_KEY', raising=False)

        with pytest.raises(ValueError):
            ProductionConfig.validate()


class TestJsonErrors:

    def test_index_lists_modules(self, client):
        data = client.get('/').get_json()['data']

        assert data['name'] == 'PSP Academy'
        assert len(data['modules']) == 7

    def test_not_found(self, client):
        response = client.get('/nowhere')

        assert response.status_code == 404
        assert response.get_json() == {'success': False, 'error': 'Resource not found'}

    def test_method_not_allowed(self, client):
        response = client.delete('/facilities/catalog')

        assert response.status_code == 405
        assert response.get_json()['success'] is False

    @pytest.mark.parametrize('url, method', [
        ('/facilities/reservations', 'POST'),
        ('/intake/applications/steps/1/validate', 'POST'),
        ('/intake/registrations/draft', 'PUT'),
        ('/intake/applications', 'POST'),
        ('/intake/applications/PSP-1/status', 'PUT'),
        ('/training/classes', 'POST'),
        ('/training/classes/TC-1', 'PUT'),
        ('/training/classes/TC-1/materials', 'POST'),
        ('/training/schedules', 'POST'),
        ('/training/schedules/SC-1', 'PUT'),
        ('/training/schedules/SC-1/participants', 'PUT'),
        ('/admin/users', 'POST'),
        ('/admin/users/USER-1', 'PUT'),
        ('/admin/roles', 'POST'),
        ('/admin/roles/role-admin', 'PUT'),
        ('/admin/roles/role-admin/permissions/toggle', 'POST'),
        ('/profiles/', 'POST'),
        ('/profiles/PROF-1', 'PUT'),
    ])
    def test_array_body_rejected(self, client, url, method):
        response = client.open(url, method=method, json=[{'name': 'x'}])

        assert response.status_code == 400
        assert response.get_json()['success'] is False


class TestCsrfProtection:

    BOOKING = {
        'facilityType': 'range',
        'checkIn': '2025-05-01',
        'checkOut': '2025-05-02',
        'instructorName': 'Sgt. Miller',
        'instructorEmail': 'miller@example.com',
        'purpose': 'Range qualification',
    }

    @pytest.fixture
    def protected_client(self, tmp_path):
        protected = create_app('test')
        protected.config['WTF_CSRF_ENABLED'] = True
        protected.config['DATABASE_PATH'] = str(tmp_path / 'csrf.db')
        return protected.test_client()

    def test_write_without_token_rejected(self, protected_client):
        response = protected_client.post('/facilities/reservations', json=self.BOOKING)

        assert response.status_code == 400
        assert 'CSRF' in response.get_json()['error']

    def test_write_with_issued_token(self, protected_client):
        issued = protected_client.get('/csrf-token').get_json()['data']
        assert issued['header'] == 'X-CSRFToken'

        response = protected_client.post(
            '/facilities/reservations', json=self.BOOKING,
            headers={issued['header']: issued['csrf_token']}
        )

        assert response.status_code == 201
        assert response.get_json()['data']['status'] == 'active'


class TestCliCommands:

    def test_create_user(self, app):
        from models.user import get_user_by_username

        result = app.test_cli_runner().invoke(args=[
            'create-user', 'jdoe', 'jdoe@example.com',
            '--full-name', 'Jane Doe', '--cell-number', '717-555-0100', '--role', 'Instructor',
        ])

        assert result.exit_code == 0, result.output
        assert get_user_by_username('jdoe')['status'] == 'Active'

    def test_create_user_unknown_role(self, app):
        result = app.test_cli_runner().invoke(args=[
            'create-user', 'jdoe', 'jdoe@example.com',
            '--full-name', 'Jane Doe', '--cell-number', '717-555-0100', '--role', 'Janitor',
        ])

        assert result.exit_code == 1

    def test_cleaning_report(self, app, client):
        runner = app.test_cli_runner()
        assert 'No facilities need cleaning.' in runner.invoke(args=['cleaning-report']).output

        response = client.post('/facilities/reservations', json={
            'facility_type': 'pool', 'check_in': '2025-07-01', 'check_out': '2025-07-02',
            'instructor_name': 'Coach Reyes', 'instructor_email': 'reyes@example.com',
            'purpose': 'Water survival training',
        })
        client.post(f"/facilities/reservations/{response.get_json()['data']['id']}/cancel")

        result = runner.invoke(args=['cleaning-report'])
        assert 'Pool' in result.output
        assert '1 reservation(s) need cleaning.' in result.output
