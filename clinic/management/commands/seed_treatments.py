"""
Management command to install the default treatment catalogue.
"""
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from clinic.models import Treatment

SINGLE = Treatment.TYPE_SINGLE
MULTIPLE = Treatment.TYPE_MULTIPLE

# name, price, duration, type, rating, reviews
DEFAULT_TREATMENTS = [
    ('General Checkup', '50', '≥ 1 hour', SINGLE, None, 0),
    ('Teeth Whitening', '300', '≥ 1 hour', MULTIPLE, None, 0),
    ('Teeth Cleaning', '75', '≥ 1 hour', SINGLE, '3.8', 48),
    ('Tooth Extraction', '300', '≥ 1 hour', MULTIPLE, '4.5', 110),
    ('Tooth Fillings', '210', '≈ 1.5 hour', SINGLE, '3.2', 75),
    ('Tooth Scaling', '140', '≈ 1.5 hour', MULTIPLE, '4.5', 166),
    ('Tooth Braces (Metal)', '3000', '≥ 1.5 hour', MULTIPLE, '4.0', 220),
    ('Veneers', '925', '≥ 1.5 hour', SINGLE, '4.0', 32),
    ('Bonding', '190', '≥ 1.5 hour', SINGLE, '4.0', 40),
]


class Command(BaseCommand):
    help = "Install the default treatments (idempotent; existing names are left alone)."

    def handle(self, *args, **options):
        created = 0
        with transaction.atomic():
            for name, price, duration, kind, rating, reviews in DEFAULT_TREATMENTS:
                if Treatment.objects.filter(name=name).exists():
                    continue
                Treatment.objects.create(
                    name=name,
                    price=Decimal(price),
                    duration=duration,
                    type=kind,
                    rating=Decimal(rating) if rating else None,
                    reviews=reviews,
                )
                created += 1
        self.stdout.write(self.style.SUCCESS(
            f"Treatments ready: {created} created, {len(DEFAULT_TREATMENTS) - created} already present."
        ))
