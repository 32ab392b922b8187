"""
Patient management views.

Any signed-in account (admin, staff or dentist) may list, register,
update and remove patients.  Removing a patient also removes their
booked appointments.
"""
from __future__ import annotations

from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Patient
from clinic.serializers.patient import PatientListQuerySerializer, PatientSerializer


def _get_patient(pk: int) -> Patient:
    patient = Patient.objects.filter(pk=pk).first()
    if not patient:
        raise NotFound('Patient not found')
    return patient


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def patients_list(request):
    if request.method == 'GET':
        q = PatientListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        qs = Patient.objects.order_by('name', 'id')
        term = (q.validated_data.get('q') or '').strip()
        if term:
            qs = qs.filter(Q(name__icontains=term) | Q(contact__icontains=term) | Q(email__icontains=term))
        return Response(PatientSerializer(qs, many=True).data)

    s = PatientSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    s.save()
    return Response(s.data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def patient_detail(request, pk: int):
    patient = _get_patient(pk)
    if request.method == 'GET':
        return Response(PatientSerializer(patient).data)
    if request.method == 'PUT':
        s = PatientSerializer(patient, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        s.save()
        return Response(s.data)
    patient.delete()
    return Response({'message': 'Deleted'})
