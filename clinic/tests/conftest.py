import datetime as dt

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from clinic.authentication import issue_token
from clinic.models import Dentist, Patient, User

PASSWORD = 'Sm1lePass'


@pytest.fixture(autouse=True)
def _clear_throttles():
    # throttle counters live in the locmem cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(username='staffer', role=User.ROLE_STAFF, email='', password=PASSWORD):
        return User.objects.create_user(username=username, password=password, role=role, email=email)
    return _make


@pytest.fixture
def client_for():
    def _client(user):
        c = APIClient()
        c.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_token(user)}')
        return c
    return _client


@pytest.fixture
def staff(make_user):
    return make_user('staffer', User.ROLE_STAFF, 'staff@example.com')


@pytest.fixture
def admin(make_user):
    return make_user('boss', User.ROLE_ADMIN, 'boss@example.com')


@pytest.fixture
def staff_client(client_for, staff):
    return client_for(staff)


@pytest.fixture
def admin_client(client_for, admin):
    return client_for(admin)


@pytest.fixture
def patient(db):
    return Patient.objects.create(name='Ana Lima', contact='555-0101', age=34, email='ana@example.com')


@pytest.fixture
def dentist(db):
    return Dentist.objects.create(name='Dr. Rao', specialization='Orthodontics', available=['Mon', 'Wed'])


@pytest.fixture
def tomorrow():
    return dt.date.today() + dt.timedelta(days=1)
