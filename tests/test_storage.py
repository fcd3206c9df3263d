"""
Tests for the key-value document storage.
"""

from database import get_db
from models.storage import (key_exists, load_collection, save_collection,
                            load_document, save_document, delete_document)


class TestStorage:

    def test_missing_collection_is_empty(self, app):
        assert load_collection('psp_applications') == []
        assert key_exists('psp_applications') is False

    def test_save_replaces_collection(self, app):
        save_collection('training_classes', [{'id': 'a'}, {'id': 'b'}])
        save_collection('training_classes', [{'id': 'c'}])

        assert load_collection('training_classes') == [{'id': 'c'}]

        cursor = get_db().execute(
            "SELECT COUNT(*) FROM app_storage WHERE storage_key = 'training_classes'"
        )
        assert cursor.fetchone()[0] == 1

    def test_documents(self, app):
        assert load_document('psp_application_draft') is None

        save_document('psp_application_draft', {'first_name': 'Ja'})
        assert load_document('psp_application_draft') == {'first_name': 'Ja'}

        assert delete_document('psp_application_draft') is True
        assert delete_document('psp_application_draft') is False
        assert load_document('psp_application_draft') is None

    def test_default_roles_seeded(self, app):
        roles = load_collection('admin_roles')

        assert [r['name'] for r in roles] == ['Administrator', 'Instructor', 'Applicant']
