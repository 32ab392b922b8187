from rest_framework import serializers

from clinic.models import User


class UserSerializer(serializers.ModelSerializer):
    created_at = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'role', 'email', 'created_at']
        read_only_fields = fields
