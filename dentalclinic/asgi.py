"""
ASGI config for the dental clinic project.

Plain HTTP only; exposes the ASGI callable as ``application``.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "dentalclinic.settings")

application = get_asgi_application()
