"""
ASGI entry point.  The default settings module is the development
configuration; deployments set DJANGO_SETTINGS_MODULE explicitly.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cyberpit_backend.settings.dev")

application = get_asgi_application()
