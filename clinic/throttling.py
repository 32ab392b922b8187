"""
Per-client rate limits for the unauthenticated account endpoints.

Rates come from ``REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']`` under the
``login`` and ``password_reset`` scopes.
"""
from rest_framework.throttling import SimpleRateThrottle


class _ClientIPThrottle(SimpleRateThrottle):
    def get_cache_key(self, request, view):
        return self.cache_format % {'scope': self.scope, 'ident': self.get_ident(request)}


class LoginRateThrottle(_ClientIPThrottle):
    scope = 'login'


class PasswordResetRateThrottle(_ClientIPThrottle):
    scope = 'password_reset'
