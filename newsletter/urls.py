"""
Public URL patterns for the newsletter app, mounted under ``/api/``.
The admin viewset is registered on the admin router in the project urls.
"""
from rest_framework.routers import DefaultRouter

from .views import SubscriptionViewSet

router = DefaultRouter()
router.register(r"subscriptions", SubscriptionViewSet, basename="subscription")

urlpatterns = router.urls
