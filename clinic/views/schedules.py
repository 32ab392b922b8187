"""
Calendar schedule views.

Schedules are calendar entries that are not bookings: holidays, blocked
time, staff meetings and planned procedures.  An entry spans ``date`` to
``endDate`` (inclusive) and may name a dentist and a patient.
"""
from __future__ import annotations

from django.db.models import Q
from django.utils.dateparse import parse_date
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Schedule
from clinic.serializers.schedule import ScheduleSerializer


def _date_param(request, name):
    raw = request.query_params.get(name)
    if not raw:
        return None
    try:
        value = parse_date(raw)
    except ValueError:
        value = None
    if value is None:
        raise ValidationError({name: 'Date has wrong format. Use YYYY-MM-DD.'})
    return value


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def schedules_list(request):
    if request.method == 'GET':
        start = _date_param(request, 'from')
        end = _date_param(request, 'to')
        qs = Schedule.objects.select_related('dentist', 'patient')
        if start:
            # overlap: the entry ends (or, single-day, starts) on/after the window start
            qs = qs.filter(Q(end_date__gte=start) | Q(end_date__isnull=True, date__gte=start))
        if end:
            qs = qs.filter(date__lte=end)
        return Response(ScheduleSerializer(qs, many=True).data)

    s = ScheduleSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    s.save()
    return Response(s.data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def schedule_detail(request, pk: int):
    schedule = Schedule.objects.filter(pk=pk).first()
    if not schedule:
        raise NotFound('Schedule not found')
    if request.method == 'GET':
        return Response(ScheduleSerializer(schedule).data)
    if request.method == 'PUT':
        s = ScheduleSerializer(schedule, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        s.save()
        return Response(s.data)
    schedule.delete()
    return Response({'message': 'Deleted'})
