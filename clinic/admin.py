"""
Django admin registrations for the clinic models.

Exposes accounts, records and the audit trail under ``/admin/`` so that
superusers can inspect and correct data by hand.
"""

from django.contrib import admin

from .models import Appointment, AuditEvent, Dentist, Patient, Schedule, Treatment, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('username', 'role', 'email', 'is_staff', 'is_superuser', 'date_joined')
    list_filter = ('role',)
    search_fields = ('username', 'email')
    exclude = ('password', 'reset_code')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'contact', 'age', 'gender', 'created_at')
    search_fields = ('name', 'contact', 'email')


@admin.register(Dentist)
class DentistAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'specialization', 'contact', 'license')
    search_fields = ('name', 'specialization', 'license')


@admin.register(Treatment)
class TreatmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'price', 'duration', 'type', 'rating', 'reviews')
    list_filter = ('type',)
    search_fields = ('name',)


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'date', 'time', 'dentist', 'patient', 'service', 'status')
    list_filter = ('status', 'dentist')
    search_fields = ('patient__name', 'dentist__name', 'service')
    date_hierarchy = 'date'


@admin.register(Schedule)
class ScheduleAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'type', 'date', 'end_date', 'start_time', 'end_time', 'dentist')
    list_filter = ('type',)
    search_fields = ('title', 'procedure')


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('created_at', 'action', 'user', 'object_type', 'object_id')
    list_filter = ('action',)
    search_fields = ('action', 'user__username', 'object_type')
