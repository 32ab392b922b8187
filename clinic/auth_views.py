"""
Authentication views.

This module defines login and registration, the signed-in user's
profile, and the three-step password reset by e-mailed code.  The
authentication class lives in ``clinic.authentication`` so that these
views can import it without circular imports.
"""
from __future__ import annotations

import logging
from smtplib import SMTPException

from django.conf import settings
from django.db import transaction
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from clinic.authentication import issue_token
from clinic.exceptions import Conflict
from clinic.serializers.auth import (
    ForgotPasswordSerializer,
    LoginSerializer,
    ProfileUpdateSerializer,
    RegisterSerializer,
    ResetPasswordSerializer,
    VerifyResetCodeSerializer,
)
from clinic.serializers.user import UserSerializer
from clinic.services import password_reset
from clinic.services.accounts import check_credentials, email_in_use, find_by_email, register_user
from clinic.services.audit import log_action
from clinic.throttling import LoginRateThrottle, PasswordResetRateThrottle

logger = logging.getLogger(__name__)


def _client_ip(request):
    return request.META.get('REMOTE_ADDR')


# ---------------------------------------------------------------------
# Username/password login & registration
# ---------------------------------------------------------------------
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
def login_view(request):
    """Exchange username/password for a bearer token."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    username = s.validated_data['username']

    user = check_credentials(request, username, s.validated_data['password'])
    if not user:
        log_action(user=None, action='login', object_type='user',
                   detail={'result': 'fail', 'username': username, 'ip': _client_ip(request)})
        return Response({'ok': False, 'message': 'Invalid credentials'}, status=status.HTTP_401_UNAUTHORIZED)

    log_action(user=user, action='login', object_type='user', object_id=user.id,
               detail={'result': 'ok', 'ip': _client_ip(request)})
    token = issue_token(user)
    return Response({
        'token': str(token),
        'role': user.role,
        'username': user.username,
        'email': user.email,
        'expires_in': int(settings.SIMPLE_JWT['ACCESS_TOKEN_LIFETIME'].total_seconds()),
    })


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
def register_view(request):
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    user = register_user(username=vd['username'], password=vd['password'], role=vd['role'], email=vd.get('email', ''))
    log_action(user=user, action='register', object_type='user', object_id=user.id,
               detail={'role': user.role, 'ip': _client_ip(request)})
    return Response({'message': 'Registered successfully'}, status=status.HTTP_201_CREATED)


# ---------------------------------------------------------------------
# Profile of the signed-in user
# ---------------------------------------------------------------------
@api_view(['GET', 'PUT'])
@permission_classes([IsAuthenticated])
def profile_view(request):
    user = request.user
    if request.method == 'GET':
        return Response({'user': UserSerializer(user).data})

    s = ProfileUpdateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    fields = []
    if 'newPassword' in vd:
        if not user.check_password(vd['currentPassword']):
            return Response({'ok': False, 'message': 'Current password is incorrect'},
                            status=status.HTTP_401_UNAUTHORIZED)
        user.set_password(vd['newPassword'])
        fields.append('password')
    if 'email' in vd:
        if email_in_use(vd['email'], exclude_id=user.id):
            raise Conflict('Email already in use')
        user.email = vd['email']
        fields.append('email')
    user.save(update_fields=fields)
    log_action(user=user, action='profile_update', object_type='user', object_id=user.id,
               detail={'fields': fields})
    return Response({'message': 'Profile updated', 'user': UserSerializer(user).data})


# ---------------------------------------------------------------------
# Password reset by e-mailed code
# ---------------------------------------------------------------------
def _user_for_email(email):
    user = find_by_email(email)
    if not user:
        raise NotFound('No account found with that email')
    return user


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([PasswordResetRateThrottle])
def forgot_password_view(request):
    s = ForgotPasswordSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = _user_for_email(s.validated_data['email'])
    try:
        # a failed send rolls back the new code, keeping any pending one
        with transaction.atomic():
            code = password_reset.issue_reset_code(user)
            password_reset.send_reset_email(user, code)
    except (SMTPException, OSError) as e:
        logger.error('reset mail to user=%s failed: %s', user.id, e)
        return Response({'ok': False, 'message': f'Failed to send reset email: {e}'},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    log_action(user=user, action='password_reset_request', object_type='user', object_id=user.id,
               detail={'ip': _client_ip(request)})
    return Response({'message': 'Reset code sent to your email'})


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([PasswordResetRateThrottle])
def verify_reset_code_view(request):
    s = VerifyResetCodeSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user = _user_for_email(s.validated_data['email'])
    password_reset.verify_reset_code(user, s.validated_data['code'])
    return Response({'message': 'Code verified'})


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([PasswordResetRateThrottle])
def reset_password_view(request):
    s = ResetPasswordSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    user = _user_for_email(vd['email'])
    password_reset.reset_password(user, vd['code'], vd['newPassword'])
    log_action(user=user, action='password_reset', object_type='user', object_id=user.id,
               detail={'ip': _client_ip(request)})
    return Response({'message': 'Password has been reset'})
