"""
Account management for administrators.

Administrators can list every account, set a new password for any
account and remove accounts other than their own.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import User
from clinic.permissions import IsAdminRole
from clinic.serializers.auth import AdminResetPasswordSerializer
from clinic.serializers.user import UserSerializer
from clinic.services import password_reset
from clinic.services.audit import log_action


def _get_user(pk: int) -> User:
    user = User.objects.filter(pk=pk).first()
    if not user:
        raise NotFound('User not found')
    return user


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def users_list(request):
    qs = User.objects.order_by('-date_joined', '-id')
    role = request.query_params.get('role')
    if role:
        qs = qs.filter(role=role)
    return Response({'users': UserSerializer(qs, many=True).data})


@api_view(['DELETE'])
@permission_classes([IsAuthenticated, IsAdminRole])
def user_detail(request, pk: int):
    user = _get_user(pk)
    if user.pk == request.user.pk:
        return Response({'ok': False, 'message': 'You cannot delete your own account'},
                        status=status.HTTP_400_BAD_REQUEST)
    username = user.username
    user.delete()
    log_action(user=request.user, action='user_delete', object_type='user', object_id=pk,
               detail={'username': username})
    return Response({'message': f'User {username} deleted'})


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def user_reset_password(request, pk: int):
    user = _get_user(pk)
    s = AdminResetPasswordSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user.set_password(s.validated_data['newPassword'])
    password_reset.clear_reset_code(user)
    user.save(update_fields=['password', *password_reset.RESET_FIELDS])
    log_action(user=request.user, action='user_password_reset', object_type='user', object_id=user.pk,
               detail={'username': user.username})
    return Response({'message': f'Password reset for {user.username}'})
