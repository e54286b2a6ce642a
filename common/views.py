"""
Reusable view pieces for the public intake forms and admin inboxes.
"""
import logging

from rest_framework import generics, permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

logger = logging.getLogger(__name__)


class SubmissionCreateView(generics.CreateAPIView):
    """
    Anonymous form endpoint: validates, stores and answers with
    ``{"success": true, "message": success_message}``.
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "submissions"
    success_message = "Submitted successfully"

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()
        logger.info("New %s #%s received", instance._meta.verbose_name, instance.pk)
        return Response(
            {"success": True, "message": self.success_message},
            status=status.HTTP_201_CREATED,
        )


class ClearAllMixin:
    """Adds ``DELETE <list>/clear/`` that empties the viewset's queryset."""

    clear_message = "All records cleared successfully"

    @action(detail=False, methods=["delete"], url_path="clear")
    def clear(self, request):
        deleted, _ = self.get_queryset().delete()
        logger.info("Cleared %d %s rows", deleted, self.get_queryset().model._meta.verbose_name)
        return Response({"success": True, "message": self.clear_message, "deleted": deleted})
