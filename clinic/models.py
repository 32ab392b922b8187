"""
Database models for the dental clinic backend.

These models capture the records the front-end manages: staff accounts,
patients, dentists, treatments, booked appointments and free-form
calendar schedules.  Field names follow the JSON the front-end sends
where possible; camelCase keys are mapped in the serializers.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Staff account with a role and an optional pending reset code.

    Roles mirror the front-end roles: 'admin', 'staff' and 'dentist'.
    The reset code is stored hashed, like the password, together with
    the moment it stops being accepted and the number of wrong guesses
    made against it.
    """
    ROLE_ADMIN = 'admin'
    ROLE_STAFF = 'staff'
    ROLE_DENTIST = 'dentist'
    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Administrator'),
        (ROLE_STAFF, 'Staff'),
        (ROLE_DENTIST, 'Dentist'),
    ]
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_STAFF)
    reset_code = models.CharField(max_length=128, blank=True, default='')
    reset_code_expires_at = models.DateTimeField(null=True, blank=True)
    reset_attempts = models.PositiveSmallIntegerField(default=0)

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class Patient(models.Model):
    name = models.CharField(max_length=255)
    contact = models.CharField(max_length=64)
    age = models.PositiveIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)
    address = models.CharField(max_length=255, blank=True)
    medical_history = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.name


class Dentist(models.Model):
    name = models.CharField(max_length=255)
    specialization = models.CharField(max_length=255)
    contact = models.CharField(max_length=64, blank=True)
    email = models.EmailField(blank=True)
    schedule = models.CharField(max_length=255, blank=True)
    license = models.CharField(max_length=64, blank=True)
    # Free-form availability labels, e.g. ["Mon", "Wed"]
    available = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.specialization})"


class Treatment(models.Model):
    TYPE_SINGLE = 'SINGLE VISIT'
    TYPE_MULTIPLE = 'MULTIPLE VISIT'
    TYPE_CHOICES = [
        (TYPE_SINGLE, 'Single visit'),
        (TYPE_MULTIPLE, 'Multiple visit'),
    ]
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    duration = models.CharField(max_length=64)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    rating = models.DecimalField(max_digits=3, decimal_places=1, null=True, blank=True)
    reviews = models.PositiveIntegerField(default=0)

    def __str__(self) -> str:
        return self.name


class Appointment(models.Model):
    """A booked visit.  A dentist holds at most one booking per date and time."""
    STATUS_PENDING = 'Pending'
    STATUS_CONFIRMED = 'Confirmed'
    STATUS_COMPLETED = 'Completed'
    STATUS_CANCELLED = 'Cancelled'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='appointments')
    dentist = models.ForeignKey(Dentist, on_delete=models.CASCADE, related_name='appointments')
    date = models.DateField(db_index=True)
    time = models.TimeField()
    service = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['dentist', 'date', 'time'], name='unique_dentist_slot'),
        ]
        ordering = ['date', 'time']

    def __str__(self) -> str:
        return f"{self.patient_id}@{self.dentist_id} {self.date} {self.time}"


class Schedule(models.Model):
    """A calendar entry that is not a booking: holidays, blocked time, meetings."""
    TYPE_SCHEDULE = 'schedule'
    TYPE_PROCEDURE = 'procedure'
    TYPE_HOLIDAY = 'holiday'
    TYPE_BLOCKED = 'blocked'
    TYPE_MEETING = 'meeting'
    TYPE_CHOICES = [
        (TYPE_SCHEDULE, 'Schedule'),
        (TYPE_PROCEDURE, 'Procedure/Treatment'),
        (TYPE_HOLIDAY, 'Holiday'),
        (TYPE_BLOCKED, 'Blocked Time'),
        (TYPE_MEETING, 'Staff Meeting'),
    ]
    title = models.CharField(max_length=255)
    date = models.DateField(db_index=True)
    end_date = models.DateField(null=True, blank=True)
    start_time = models.TimeField(null=True, blank=True)
    end_time = models.TimeField(null=True, blank=True)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_SCHEDULE)
    procedure = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    dentist = models.ForeignKey(Dentist, null=True, blank=True, on_delete=models.SET_NULL, related_name='schedules')
    patient = models.ForeignKey(Patient, null=True, blank=True, on_delete=models.SET_NULL, related_name='schedules')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['date', 'start_time']

    def __str__(self) -> str:
        return f"{self.title} ({self.date})"


class AuditEvent(models.Model):
    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.IntegerField(blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at'], name='clinic_audi_action_5c1f0e_idx'),
            models.Index(fields=['object_type', 'object_id', 'created_at'], name='clinic_audi_object__8a2d4b_idx'),
        ]

    def __str__(self):
        return f"{self.action}:{self.user_id}@{self.created_at:%F %T}"
