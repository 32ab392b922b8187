from rest_framework import serializers

from clinic.models import Patient
from clinic.serializers.fields import CleanCharField, OptionalIntegerField


class PatientSerializer(serializers.ModelSerializer):
    name = CleanCharField(max_length=255)
    contact = CleanCharField(max_length=64)
    age = OptionalIntegerField(min_value=0, max_value=150)
    gender = CleanCharField(max_length=20, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    address = CleanCharField(max_length=255, required=False, allow_blank=True)
    medicalHistory = CleanCharField(source='medical_history', required=False, allow_blank=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Patient
        fields = ['id', 'name', 'contact', 'age', 'gender', 'email', 'address', 'medicalHistory', 'createdAt']


class PatientListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True)
