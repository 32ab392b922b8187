from rest_framework import serializers

from clinic.models import Dentist, Patient, Schedule
from clinic.serializers.fields import CleanCharField, OptionalDateField, OptionalTimeField


class ScheduleSerializer(serializers.ModelSerializer):
    title = CleanCharField(max_length=255)
    date = serializers.DateField()
    endDate = OptionalDateField(source='end_date')
    startTime = OptionalTimeField(source='start_time')
    endTime = OptionalTimeField(source='end_time')
    type = serializers.ChoiceField(choices=Schedule.TYPE_CHOICES, required=False)
    procedure = CleanCharField(max_length=255, required=False, allow_blank=True)
    description = CleanCharField(required=False, allow_blank=True)
    dentistId = serializers.PrimaryKeyRelatedField(
        source='dentist', queryset=Dentist.objects.all(), required=False, allow_null=True,
    )
    patientId = serializers.PrimaryKeyRelatedField(
        source='patient', queryset=Patient.objects.all(), required=False, allow_null=True,
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Schedule
        fields = ['id', 'title', 'date', 'endDate', 'startTime', 'endTime', 'type', 'procedure',
                  'description', 'dentistId', 'patientId', 'createdAt']

    def _current(self, attrs, name):
        if name in attrs:
            return attrs[name]
        return getattr(self.instance, name, None) if self.instance is not None else None

    def validate(self, attrs):
        date = self._current(attrs, 'date')
        end_date = self._current(attrs, 'end_date')
        if date and end_date and end_date < date:
            raise serializers.ValidationError('End date cannot be before the start date')
        start_time = self._current(attrs, 'start_time')
        end_time = self._current(attrs, 'end_time')
        if start_time and end_time and end_time <= start_time:
            raise serializers.ValidationError('End time must be after the start time')
        return attrs

