from rest_framework import serializers

from clinic.models import Dentist
from clinic.serializers.fields import CleanCharField


class DentistSerializer(serializers.ModelSerializer):
    name = CleanCharField(max_length=255)
    specialization = CleanCharField(max_length=255)
    contact = CleanCharField(max_length=64, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    schedule = CleanCharField(max_length=255, required=False, allow_blank=True)
    license = CleanCharField(max_length=64, required=False, allow_blank=True)
    available = serializers.ListField(child=serializers.CharField(max_length=64), required=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Dentist
        fields = ['id', 'name', 'specialization', 'contact', 'email', 'schedule', 'license', 'available', 'createdAt']
