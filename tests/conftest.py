"""
Pytest configuration and fixtures.
Ensures tests use an isolated test database, not the production database.
"""

import os
import pytest
import tempfile

# Set test database path BEFORE importing app
TEST_DB_PATH = os.path.join(tempfile.gettempdir(), 'academy_test.db')
os.environ['DATABASE_PATH'] = TEST_DB_PATH


@pytest.fixture(scope='session', autouse=True)
def setup_test_environment():
    """Set up test environment before any tests run."""
    os.environ['FLASK_ENV'] = 'test'

    yield

    # Cleanup: remove test database files after all tests
    for suffix in ('', '-wal', '-shm'):
        path = TEST_DB_PATH + suffix
        if os.path.exists(path):
            try:
                os.remove(path)
            except PermissionError:
                pass  # Windows may have file locked


@pytest.fixture
def app(tmp_path):
    """Create test application with a fresh database per test."""
    from app import create_app
    from database import init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False
    app.config['DATABASE_PATH'] = str(tmp_path / 'academy.db')

    with app.app_context():
        init_db()
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


# =============================================================================
# SAMPLE DATA
# =============================================================================

@pytest.fixture
def application_data():
    """A complete, valid application."""
    return {
        'first_name': 'Jane',
        'middle_name': 'Q',
        'last_name': 'Doe',
        'suffix': '',
        'email': 'jane.doe@example.com',
        'phone': '(717) 555-0100',
        'phone_type': 'Mobile',
        'home_address': '123 Main Street, Harrisburg PA',
        'mailing_address': '',
        'date_of_birth': '1990-05-17',
    }


@pytest.fixture
def registration_data(application_data):
    """A complete, valid user registration."""
    data = dict(application_data)
    data.update({
        'first_name': 'John',
        'last_name': 'Smith',
        'email': 'john.smith@example.com',
        'best_contact_method': 'Email',
        'current_employer': 'Keystone Security',
        'employer_phone': '717-555-0199',
        'employer_email': 'hr@keystone.example.com',
        'business_address': '500 Market Street, Harrisburg PA',
        'title': 'Guard',
        'employment_start_date': '2020-01-06',
    })
    return data
