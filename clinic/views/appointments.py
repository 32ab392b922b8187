"""
Appointment booking views.

A dentist can hold only one appointment for a given date and time.
Both booking and rescheduling go through
:func:`clinic.services.appointments.save_appointment`, which answers a
clash with 409.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.exceptions import Conflict
from clinic.models import Appointment
from clinic.serializers.appointment import AppointmentListQuerySerializer, AppointmentSerializer
from clinic.services.appointments import save_appointment
from clinic.services.audit import log_action


def _save_or_audit(request, serializer) -> Appointment:
    try:
        return save_appointment(serializer)
    except Conflict:
        vd = serializer.validated_data
        log_action(user=request.user, action='appointment_conflict', object_type='appointment',
                   object_id=serializer.instance.pk if serializer.instance else None,
                   detail={'dentist': getattr(vd.get('dentist'), 'pk', None),
                           'date': str(vd.get('date')), 'time': str(vd.get('time'))})
        raise


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def appointments_list(request):
    if request.method == 'GET':
        q = AppointmentListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        filters = {f'{k}_id' if k in ('dentist', 'patient') else k: v for k, v in q.validated_data.items()}
        qs = Appointment.objects.select_related('patient', 'dentist').filter(**filters)
        return Response(AppointmentSerializer(qs, many=True).data)

    s = AppointmentSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    _save_or_audit(request, s)
    return Response(s.data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def appointment_detail(request, pk: int):
    appt = Appointment.objects.select_related('patient', 'dentist').filter(pk=pk).first()
    if not appt:
        raise NotFound('Appointment not found')
    if request.method == 'GET':
        return Response(AppointmentSerializer(appt).data)
    if request.method == 'PUT':
        s = AppointmentSerializer(appt, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        _save_or_audit(request, s)
        return Response(s.data)
    appt.delete()
    return Response({'message': 'Deleted'})
