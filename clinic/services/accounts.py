from typing import Optional

from django.contrib.auth import authenticate, get_user_model
from django.db import IntegrityError, transaction

from clinic.exceptions import Conflict

User = get_user_model()


def email_in_use(email: str, *, exclude_id: Optional[int] = None) -> bool:
    if not email:
        return False
    qs = User.objects.filter(email__iexact=email)
    if exclude_id is not None:
        qs = qs.exclude(pk=exclude_id)
    return qs.exists()


def register_user(*, username: str, password: str, role: str, email: str = '') -> User:
    """Create an account with a hashed password.  Duplicates raise :class:`Conflict`."""
    if User.objects.filter(username__iexact=username).exists():
        raise Conflict('User exists')
    if email_in_use(email):
        raise Conflict('Email already in use')
    try:
        with transaction.atomic():
            return User.objects.create_user(username=username, password=password, role=role, email=email or '')
    except IntegrityError:
        raise Conflict('User exists')


def check_credentials(request, username: str, password: str) -> Optional[User]:
    return authenticate(request, username=username, password=password)


def find_by_email(email: str) -> Optional[User]:
    return User.objects.filter(email__iexact=email).order_by('id').first()
