"""
Time-boxed password reset codes.

A user asks for a reset by e-mail address; a six digit code is generated,
its hash and expiry are stored on the account and the code is mailed.
The code authorises one password change until it expires.
"""
import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.core.mail import send_mail
from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)

CODE_DIGITS = 6
MAX_ATTEMPTS = 5
RESET_FIELDS = ['reset_code', 'reset_code_expires_at', 'reset_attempts']


def generate_code() -> str:
    return f"{secrets.randbelow(10 ** CODE_DIGITS):0{CODE_DIGITS}d}"


def clear_reset_code(user) -> None:
    """Forget any pending code on ``user``; the caller saves."""
    user.reset_code = ''
    user.reset_code_expires_at = None
    user.reset_attempts = 0


def issue_reset_code(user, *, now=None) -> str:
    """Store a fresh code on ``user`` (replacing any pending one) and return it."""
    now = now or timezone.now()
    code = generate_code()
    user.reset_code = make_password(code)
    user.reset_code_expires_at = now + timedelta(minutes=settings.PASSWORD_RESET_CODE_TTL)
    user.reset_attempts = 0
    user.save(update_fields=RESET_FIELDS)
    return code


def send_reset_email(user, code: str) -> None:
    ttl = settings.PASSWORD_RESET_CODE_TTL
    send_mail(
        subject='Your password reset code',
        message=(
            f"Hello {user.username},\n\n"
            f"Use the code {code} to reset your Classic Dental password. "
            f"It expires in {ttl} minutes.\n\n"
            "If you did not ask for a reset you can ignore this message."
        ),
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[user.email],
        fail_silently=False,
    )
    logger.info('reset code mailed to user=%s', user.id)


def verify_reset_code(user, code: str, *, now=None) -> None:
    """Raise ``ValidationError`` unless ``code`` is the user's live reset code."""
    now = now or timezone.now()
    if not user.reset_code or not user.reset_code_expires_at:
        raise ValidationError('No reset code has been requested')
    if now >= user.reset_code_expires_at:
        raise ValidationError('Reset code has expired')
    if not check_password(code, user.reset_code):
        _record_failed_guess(user)


def reset_password(user, code: str, new_password: str, *, now=None) -> None:
    verify_reset_code(user, code, now=now)
    user.set_password(new_password)
    clear_reset_code(user)
    user.save(update_fields=['password', *RESET_FIELDS])


def _record_failed_guess(user) -> None:
    # increment in SQL so concurrent guesses each count
    type(user).objects.filter(pk=user.pk).update(reset_attempts=F('reset_attempts') + 1)
    user.refresh_from_db(fields=['reset_attempts'])
    if user.reset_attempts >= MAX_ATTEMPTS:
        logger.warning('reset code for user=%s discarded after %s wrong guesses', user.id, user.reset_attempts)
        clear_reset_code(user)
        user.save(update_fields=RESET_FIELDS)
        raise ValidationError('Too many invalid attempts, request a new reset code')
    raise ValidationError('Invalid reset code')
