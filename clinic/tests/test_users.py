import pytest
from django.urls import reverse

from clinic.models import AuditEvent, User

pytestmark = pytest.mark.django_db


def test_users_list_is_admin_only(staff_client, client_for, make_user):
    r = staff_client.get(reverse('users'))
    assert r.status_code == 403
    assert r.data == {'ok': False, 'message': 'Admin access required'}
    dentist_client = client_for(make_user('drx', User.ROLE_DENTIST))
    assert dentist_client.delete(reverse('user-detail', args=[1])).status_code == 403
    assert dentist_client.post(reverse('user-reset-password', args=[1]), {'newPassword': 'Fresh2Pass'},
                               format='json').status_code == 403


def test_users_list_newest_first_with_role_filter(admin_client, admin, make_user):
    make_user('desk', User.ROLE_STAFF)
    make_user('drx', User.ROLE_DENTIST)
    r = admin_client.get(reverse('users'))
    assert r.status_code == 200
    assert [u['username'] for u in r.data['users']] == ['drx', 'desk', 'boss']
    assert set(r.data['users'][0]) == {'id', 'username', 'role', 'email', 'created_at'}

    r = admin_client.get(reverse('users'), {'role': 'dentist'})
    assert [u['username'] for u in r.data['users']] == ['drx']


def test_admin_resets_user_password(admin_client, staff):
    url = reverse('user-reset-password', args=[staff.pk])
    r = admin_client.post(url, {'newPassword': 'Fresh2Pass'}, format='json')
    assert r.status_code == 200
    staff.refresh_from_db()
    assert staff.check_password('Fresh2Pass')
    assert AuditEvent.objects.filter(action='user_password_reset', object_id=staff.pk).exists()

    r = admin_client.post(url, {'newPassword': '42'}, format='json')
    assert r.status_code == 400
    r = admin_client.post(url, {}, format='json')
    assert r.data['message'] == 'Missing fields'
    r = admin_client.post(reverse('user-reset-password', args=[999]), {'newPassword': 'Fresh2Pass'},
                          format='json')
    assert r.status_code == 404
    assert r.data['message'] == 'User not found'


def test_admin_deletes_user(admin_client, staff):
    r = admin_client.delete(reverse('user-detail', args=[staff.pk]))
    assert r.status_code == 200
    assert not User.objects.filter(pk=staff.pk).exists()
    assert AuditEvent.objects.filter(action='user_delete', object_id=staff.pk).exists()
    assert admin_client.delete(reverse('user-detail', args=[staff.pk])).status_code == 404


def test_admin_cannot_delete_self(admin_client, admin):
    r = admin_client.delete(reverse('user-detail', args=[admin.pk]))
    assert r.status_code == 400
    assert r.data['message'] == 'You cannot delete your own account'
    assert User.objects.filter(pk=admin.pk).exists()
