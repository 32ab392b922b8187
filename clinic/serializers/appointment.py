from rest_framework import serializers

from clinic.models import Appointment, Dentist, Patient
from clinic.serializers.fields import CleanCharField


class AppointmentSerializer(serializers.ModelSerializer):
    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all())
    dentist = serializers.PrimaryKeyRelatedField(queryset=Dentist.objects.all())
    date = serializers.DateField()
    time = serializers.TimeField(format='%H:%M')
    service = CleanCharField(max_length=255)
    status = serializers.ChoiceField(choices=Appointment.STATUS_CHOICES, required=False)
    patientName = serializers.CharField(source='patient.name', read_only=True)
    dentistName = serializers.CharField(source='dentist.name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Appointment
        fields = ['id', 'patient', 'dentist', 'date', 'time', 'service', 'status',
                  'patientName', 'dentistName', 'createdAt']
        # The dentist/date/time slot is checked by services.appointments so
        # that a clash is reported as 409 rather than a field error.
        validators = []


class AppointmentListQuerySerializer(serializers.Serializer):
    date = serializers.DateField(required=False)
    dentist = serializers.IntegerField(required=False)
    patient = serializers.IntegerField(required=False)
    status = serializers.ChoiceField(choices=Appointment.STATUS_CHOICES, required=False)
