"""
Front desk dashboard endpoint.

Gives the landing screen its headline numbers: record counts, how
today's bookings stand and the next few appointments coming up.
"""
from __future__ import annotations

from django.db.models import Count, Q
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Appointment, Dentist, Patient, Treatment
from clinic.serializers.appointment import AppointmentSerializer

UPCOMING_LIMIT = 5


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Return totals and today's appointment summary.

    ``upcoming`` lists the next appointments from now on that are not
    cancelled, soonest first.
    """
    now = timezone.localtime()
    today = now.date()
    today_stats = Appointment.objects.filter(date=today).aggregate(
        total=Count('id'),
        pending=Count('id', filter=Q(status=Appointment.STATUS_PENDING)),
        completed=Count('id', filter=Q(status=Appointment.STATUS_COMPLETED)),
        cancelled=Count('id', filter=Q(status=Appointment.STATUS_CANCELLED)),
    )
    upcoming = (
        Appointment.objects.select_related('patient', 'dentist')
        .exclude(status=Appointment.STATUS_CANCELLED)
        .filter(Q(date__gt=today) | Q(date=today, time__gte=now.time().replace(second=0, microsecond=0)))
        .order_by('date', 'time')[:UPCOMING_LIMIT]
    )
    return Response({
        'patients': Patient.objects.count(),
        'dentists': Dentist.objects.count(),
        'treatments': Treatment.objects.count(),
        'today': today_stats,
        'upcoming': AppointmentSerializer(upcoming, many=True).data,
    })
