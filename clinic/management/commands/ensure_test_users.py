from django.core.management.base import BaseCommand
from django.contrib.auth.hashers import make_password

from clinic.models import User

TEST_PASSWORD = "clinic123"
TEST_SET = [
    ("admin1", User.ROLE_ADMIN),
    ("staff1", User.ROLE_STAFF),
    ("dentist1", User.ROLE_DENTIST),
]


class Command(BaseCommand):
    help = f"Ensure one test account per role exists with password={TEST_PASSWORD} (idempotent)."

    def handle(self, *args, **opts):
        for username, role in TEST_SET:
            u, created = User.objects.get_or_create(
                username=username,
                defaults={"role": role, "password": make_password(TEST_PASSWORD), "is_active": True},
            )
            if not created:
                # reset password, role and active flag to known values
                u.password = make_password(TEST_PASSWORD)
                u.role = role
                u.is_active = True
                u.save(update_fields=["password", "role", "is_active"])
            self.stdout.write(self.style.SUCCESS(f"ok: {username} ({role})"))
        self.stdout.write(self.style.SUCCESS("All test users ensured."))
