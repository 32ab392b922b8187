from rest_framework import serializers

from clinic.models import Treatment
from clinic.serializers.fields import CleanCharField


class TreatmentSerializer(serializers.ModelSerializer):
    name = CleanCharField(max_length=255)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, coerce_to_string=False)
    duration = CleanCharField(max_length=64)
    type = serializers.ChoiceField(choices=Treatment.TYPE_CHOICES)
    rating = serializers.DecimalField(max_digits=3, decimal_places=1, coerce_to_string=False, read_only=True)
    reviews = serializers.IntegerField(read_only=True)

    class Meta:
        model = Treatment
        fields = ['id', 'name', 'price', 'duration', 'type', 'rating', 'reviews']
