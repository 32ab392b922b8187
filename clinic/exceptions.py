import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflict'
    default_code = 'conflict'


def _first_message(detail):
    """Flatten DRF error detail (str, list or dict) into one readable line."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            msg = _first_message(value)
            if key in ('detail', 'non_field_errors'):
                return msg
            return f'{key}: {msg}'
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def _missing_fields(detail) -> list[str]:
    if not isinstance(detail, dict):
        return []
    return [
        key for key, errors in detail.items()
        if isinstance(errors, list) and any(getattr(e, 'code', None) in ('required', 'blank', 'null') for e in errors)
    ]


def api_exception_handler(exc, context):
    if isinstance(exc, IntegrityError):
        exc = Conflict(str(exc))
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('unhandled error in %s', context.get('view'))
        return Response({'ok': False, 'message': str(exc)}, status=500)

    body = {'ok': False}
    if isinstance(exc, ValidationError):
        missing = _missing_fields(exc.detail)
        if missing:
            body['message'] = 'Missing fields'
            body['fields'] = missing
        else:
            body['message'] = _first_message(exc.detail)
        body['errors'] = exc.detail
    else:
        body['message'] = _first_message(resp.data)
    headers = {k: resp[k] for k in ('WWW-Authenticate', 'Retry-After') if resp.has_header(k)}
    return Response(body, status=resp.status_code, headers=headers)
