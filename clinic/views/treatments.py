"""
Treatment catalogue views.

Treatments are the services an appointment can book.  The default
catalogue is installed by ``manage.py seed_treatments``; rating and
review counts are read-only here.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Treatment
from clinic.serializers.treatment import TreatmentSerializer


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def treatments_list(request):
    if request.method == 'GET':
        return Response(TreatmentSerializer(Treatment.objects.order_by('id'), many=True).data)
    s = TreatmentSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    s.save()
    return Response(s.data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def treatment_detail(request, pk: int):
    treatment = Treatment.objects.filter(pk=pk).first()
    if not treatment:
        raise NotFound('Treatment not found')
    if request.method == 'GET':
        return Response(TreatmentSerializer(treatment).data)
    if request.method == 'PUT':
        s = TreatmentSerializer(treatment, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        s.save()
        return Response(s.data)
    treatment.delete()
    return Response({'message': 'Deleted'})
