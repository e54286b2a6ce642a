"""
Celery application for the CyberPiT site backend.

Only the newsletter broadcast runs here (``newsletter.tasks``); tasks are
picked up from each installed app's ``tasks.py``.
"""
import os
from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "cyberpit_backend.settings.dev")

celery_app = Celery("cyberpit_backend")

# CELERY_* keys in Django settings configure the app
celery_app.config_from_object("django.conf:settings", namespace="CELERY")
celery_app.autodiscover_tasks()
