"""
Tests for the non-API endpoints, the error envelope and the management
commands.
"""
import logging

import pytest
from django.core.management import call_command
from django.db import DatabaseError
from django.urls import reverse

from clinic.exceptions import Conflict, api_exception_handler
from clinic.models import Treatment, User

pytestmark = pytest.mark.django_db


def test_root_describes_api(client):
    r = client.get('/')
    assert r.status_code == 200
    assert r.content.decode() == 'Classic Dental Scheduling System API'


def test_healthz(client):
    r = client.get(reverse('healthz'))
    assert r.status_code == 200
    assert r.json() == {'ok': True, 'db': True}


def test_healthz_reports_database_failure(client, monkeypatch):
    class BrokenConnection:
        def cursor(self):
            raise DatabaseError('database is down')

    monkeypatch.setattr('clinic.views.health.connections', {'default': BrokenConnection()})
    r = client.get(reverse('healthz'))
    assert r.status_code == 500
    assert r.json() == {'ok': False, 'message': 'database is down'}


def test_request_logging(staff_client, caplog, monkeypatch):
    # the clinic logger does not propagate to the root handler by default
    monkeypatch.setattr(logging.getLogger('clinic'), 'propagate', True)
    with caplog.at_level(logging.INFO, logger='clinic.middleware'):
        staff_client.get(reverse('patients'))
    assert any('GET /api/patients 200' in rec.getMessage() for rec in caplog.records)


def test_unhandled_error_becomes_500_envelope():
    resp = api_exception_handler(RuntimeError('disk on fire'), {'view': None})
    assert resp.status_code == 500
    assert resp.data == {'ok': False, 'message': 'disk on fire'}


def test_conflict_envelope():
    resp = api_exception_handler(Conflict('User exists'), {'view': None})
    assert resp.status_code == 409
    assert resp.data == {'ok': False, 'message': 'User exists'}


def test_seed_treatments_is_idempotent():
    call_command('seed_treatments')
    call_command('seed_treatments')
    assert Treatment.objects.count() == 9
    braces = Treatment.objects.get(name='Tooth Braces (Metal)')
    assert braces.price == 3000
    assert braces.type == Treatment.TYPE_MULTIPLE
    assert braces.reviews == 220
    assert Treatment.objects.get(name='General Checkup').rating is None


def test_ensure_test_users():
    call_command('ensure_test_users')
    call_command('ensure_test_users')
    roles = dict(User.objects.values_list('username', 'role'))
    assert roles == {'admin1': 'admin', 'staff1': 'staff', 'dentist1': 'dentist'}
    assert User.objects.get(username='dentist1').check_password('clinic123')
