from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.models import Dentist
from clinic.serializers.dentist import DentistSerializer


def _get_dentist(pk: int) -> Dentist:
    dentist = Dentist.objects.filter(pk=pk).first()
    if not dentist:
        raise NotFound('Dentist not found')
    return dentist


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def dentists_list(request):
    if request.method == 'GET':
        return Response(DentistSerializer(Dentist.objects.order_by('name', 'id'), many=True).data)
    s = DentistSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    s.save()
    return Response(s.data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAuthenticated])
def dentist_detail(request, pk: int):
    dentist = _get_dentist(pk)
    if request.method == 'GET':
        return Response(DentistSerializer(dentist).data)
    if request.method == 'PUT':
        s = DentistSerializer(dentist, data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        s.save()
        return Response(s.data)
    # Appointments go with the dentist; schedules keep the entry unassigned
    dentist.delete()
    return Response({'message': 'Deleted'})
