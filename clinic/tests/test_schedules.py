import datetime as dt

import pytest
from django.urls import reverse

from clinic.models import Schedule

pytestmark = pytest.mark.django_db

DAY = dt.date(2030, 3, 10)


def _entry(title, start, end=None, **kw):
    return Schedule.objects.create(title=title, date=start, end_date=end, **kw)


def test_create_schedule(staff_client, dentist):
    r = staff_client.post(reverse('schedules'), {
        'title': 'Staff meeting', 'date': '2030-03-10', 'startTime': '08:00', 'endTime': '09:00',
        'type': 'meeting', 'dentistId': dentist.pk, 'endDate': '', 'patientId': None,
    }, format='json')
    assert r.status_code == 201
    assert r.data['startTime'] == '08:00'
    assert r.data['endDate'] is None
    assert r.data['dentistId'] == dentist.pk
    assert r.data['patientId'] is None


def test_schedule_defaults_and_missing_fields(staff_client):
    r = staff_client.post(reverse('schedules'), {'title': 'Clinic closed', 'date': '2030-12-25'}, format='json')
    assert r.status_code == 201
    assert r.data['type'] == 'schedule'
    r = staff_client.post(reverse('schedules'), {'type': 'holiday'}, format='json')
    assert r.status_code == 400
    assert set(r.data['fields']) == {'title', 'date'}


def test_schedule_rejects_backwards_ranges(staff_client):
    r = staff_client.post(reverse('schedules'), {'title': 'Leave', 'date': '2030-03-10', 'endDate': '2030-03-09'},
                          format='json')
    assert r.status_code == 400
    assert r.data['message'] == 'End date cannot be before the start date'
    r = staff_client.post(reverse('schedules'), {'title': 'Block', 'date': '2030-03-10',
                                                 'startTime': '10:00', 'endTime': '10:00'}, format='json')
    assert r.status_code == 400
    assert r.data['message'] == 'End time must be after the start time'


def test_update_checks_range_against_stored_values(staff_client):
    entry = _entry('Leave', DAY, DAY + dt.timedelta(days=2))
    url = reverse('schedule-detail', args=[entry.pk])
    r = staff_client.put(url, {'date': '2030-03-20'}, format='json')
    assert r.status_code == 400
    r = staff_client.put(url, {'endDate': '2030-03-11', 'type': 'holiday'}, format='json')
    assert r.status_code == 200
    assert r.data['endDate'] == '2030-03-11'
    assert r.data['type'] == 'holiday'


def test_window_filter_returns_overlapping_entries(staff_client):
    _entry('before', DAY - dt.timedelta(days=5))
    spans_in = _entry('spans in', DAY - dt.timedelta(days=2), DAY + dt.timedelta(days=1))
    inside = _entry('inside', DAY + dt.timedelta(days=2))
    spans_out = _entry('spans out', DAY + dt.timedelta(days=6), DAY + dt.timedelta(days=9))
    _entry('after', DAY + dt.timedelta(days=8))

    r = staff_client.get(reverse('schedules'), {'from': '2030-03-10', 'to': '2030-03-16'})
    assert r.status_code == 200
    assert [e['id'] for e in r.data] == [spans_in.pk, inside.pk, spans_out.pk]

    r = staff_client.get(reverse('schedules'))
    assert len(r.data) == 5


def test_window_filter_rejects_bad_dates(staff_client):
    r = staff_client.get(reverse('schedules'), {'from': '10/03/2030'})
    assert r.status_code == 400
    assert r.data['message'].startswith('from:')


def test_schedule_detail_and_delete(staff_client):
    entry = _entry('Whitening', DAY, type=Schedule.TYPE_PROCEDURE, procedure='Teeth Whitening')
    url = reverse('schedule-detail', args=[entry.pk])
    r = staff_client.get(url)
    assert r.data['procedure'] == 'Teeth Whitening'
    assert staff_client.delete(url).data == {'message': 'Deleted'}
    assert staff_client.get(url).status_code == 404
