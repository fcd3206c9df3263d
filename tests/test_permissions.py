"""
Tests for the role permission matrix helpers.
"""

import pytest

from utils.permissions import (APPLICATION_MODULES, CRUD_PERMISSIONS, count_permissions,
                               full_permissions, grant_module, has_permission,
                               is_known_permission, normalize_permissions, toggle_permission)


class TestNormalize:

    def test_drops_unknown_entries(self):
        matrix = normalize_permissions({
            'profiles': {'View Details': ['Delete', 'Read', 'Fly', 'Read'], 'Payroll': ['Read']},
            'spaceship': {'Bridge': ['Read']},
            'training-records': {'Create Class': []},
        })

        assert matrix == {'profiles': {'View Details': ['Read', 'Delete']}}

    @pytest.mark.parametrize('value', [None, [], 'all'])
    def test_non_dict_is_empty(self, value):
        assert normalize_permissions(value) == {}


class TestToggle:

    def test_toggle_grants_then_revokes(self):
        granted = toggle_permission({}, 'profiles', 'View Details', 'Read')
        assert granted == {'profiles': {'View Details': ['Read']}}

        revoked = toggle_permission(granted, 'profiles', 'View Details', 'Read')
        assert revoked == {}

    def test_toggle_returns_new_matrix(self):
        original = {'profiles': {'View Details': ['Read']}}

        toggle_permission(original, 'profiles', 'View Details', 'Update')

        assert original == {'profiles': {'View Details': ['Read']}}

    def test_unknown_triple(self):
        assert is_known_permission('profiles', 'View Details', 'Approve') is False
        with pytest.raises(ValueError):
            toggle_permission({}, 'profiles', 'View Details', 'Approve')


class TestFullMatrix:

    def test_full_permissions_counts_every_cell(self):
        cells = sum(len(m['sections']) for m in APPLICATION_MODULES) * len(CRUD_PERMISSIONS)

        assert count_permissions(full_permissions()) == cells

    def test_grant_module_subset(self):
        matrix = grant_module({}, 'track-application', ['Read', 'Create'])

        assert matrix == {'track-application': {'View Status': ['Create', 'Read'],
                                                'Download Documents': ['Create', 'Read']}}
        assert has_permission(matrix, 'track-application', 'View Status', 'Create')
        assert not has_permission(None, 'track-application', 'View Status', 'Create')
