"""
Bearer-token authentication and token issuance.

Tokens are signed JWT access tokens produced by
``rest_framework_simplejwt``.  Besides the user id they carry the
username and role so that the front-end can read them without another
round trip.  Keeping this module free of view code avoids circular
imports when the REST framework loads authentication classes.
"""
from __future__ import annotations

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.tokens import AccessToken


class BearerTokenAuthentication(JWTAuthentication):
    """JWT authentication reading ``Authorization: Bearer <token>``.

    The header keyword comes from ``SIMPLE_JWT['AUTH_HEADER_TYPES']``.
    This subclass exists to provide a stable import path for the
    project's configuration.
    """

    www_authenticate_realm = 'clinic'


def issue_token(user) -> AccessToken:
    token = AccessToken.for_user(user)
    token['username'] = user.username
    token['role'] = user.role
    return token
