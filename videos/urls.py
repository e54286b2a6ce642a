"""
Public URL patterns for the videos app, mounted under ``/api/``.
"""
from django.urls import path

from .views import current_videos

urlpatterns = [
    path("videos/current/", current_videos, name="videos-current"),
]
