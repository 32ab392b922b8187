"""
URL mappings for the clinic API.

Paths match what the single page front end calls.  Trailing slashes are
omitted throughout (``APPEND_SLASH`` is off).
"""
from django.urls import include, path

from .auth_views import (
    forgot_password_view,
    login_view,
    profile_view,
    register_view,
    reset_password_view,
    verify_reset_code_view,
)
from .views import appointments, dentists, patients, schedules, treatments, users
from .views.dashboard import dashboard
from .views.health import healthz, index

urlpatterns = [
    path('', index, name='index'),
    path('', include('django_prometheus.urls')),
    path('healthz', healthz, name='healthz'),
    # Authentication
    path('api/login', login_view, name='login'),
    path('api/register', register_view, name='register'),
    path('api/profile', profile_view, name='profile'),
    path('api/forgot-password', forgot_password_view, name='forgot-password'),
    path('api/verify-reset-code', verify_reset_code_view, name='verify-reset-code'),
    path('api/reset-password', reset_password_view, name='reset-password'),
    # Account administration
    path('api/users', users.users_list, name='users'),
    path('api/users/<int:pk>', users.user_detail, name='user-detail'),
    path('api/users/<int:pk>/reset-password', users.user_reset_password, name='user-reset-password'),
    # Clinic records
    path('api/patients', patients.patients_list, name='patients'),
    path('api/patients/<int:pk>', patients.patient_detail, name='patient-detail'),
    path('api/dentists', dentists.dentists_list, name='dentists'),
    path('api/dentists/<int:pk>', dentists.dentist_detail, name='dentist-detail'),
    path('api/treatments', treatments.treatments_list, name='treatments'),
    path('api/treatments/<int:pk>', treatments.treatment_detail, name='treatment-detail'),
    path('api/appointments', appointments.appointments_list, name='appointments'),
    path('api/appointments/<int:pk>', appointments.appointment_detail, name='appointment-detail'),
    path('api/schedules', schedules.schedules_list, name='schedules'),
    path('api/schedules/<int:pk>', schedules.schedule_detail, name='schedule-detail'),
    path('api/dashboard', dashboard, name='dashboard'),
]
