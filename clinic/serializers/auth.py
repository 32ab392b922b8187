from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from clinic.models import User


def _validate_new_password(value):
    try:
        validate_password(value)
    except DjangoValidationError as e:
        raise serializers.ValidationError(e.messages)
    return value


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(trim_whitespace=False)
    role = serializers.ChoiceField(choices=User.ROLE_CHOICES)
    email = serializers.EmailField(required=False, allow_blank=True)

    def validate_password(self, v):
        return _validate_new_password(v)


class ProfileUpdateSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False, allow_blank=True)
    currentPassword = serializers.CharField(required=False, trim_whitespace=False)
    newPassword = serializers.CharField(required=False, trim_whitespace=False)

    def validate_newPassword(self, v):
        return _validate_new_password(v)

    def validate(self, attrs):
        if 'email' not in attrs and 'newPassword' not in attrs:
            raise serializers.ValidationError('No changes to save')
        if 'newPassword' in attrs and not attrs.get('currentPassword'):
            raise serializers.ValidationError('Current password is required to change password')
        return attrs


class ForgotPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()


class VerifyResetCodeSerializer(serializers.Serializer):
    email = serializers.EmailField()
    code = serializers.RegexField(r'^\d{6}$', error_messages={'invalid': 'Reset code must be 6 digits'})


class ResetPasswordSerializer(VerifyResetCodeSerializer):
    newPassword = serializers.CharField(trim_whitespace=False)

    def validate_newPassword(self, v):
        return _validate_new_password(v)


class AdminResetPasswordSerializer(serializers.Serializer):
    newPassword = serializers.CharField(trim_whitespace=False)

    def validate_newPassword(self, v):
        return _validate_new_password(v)
