"""
Views for the newsletter app.

Public visitors subscribe; admins manage the list and broadcast through
``AdminSubscriptionViewSet.bulk_email``.  A reader is unsubscribed by an
admin switching ``is_active`` off.
"""
import logging

from rest_framework import mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from common.permissions import IsStaffOrSuperuser
from .models import Subscription
from .serializers import (
    BatchDeleteSerializer,
    BulkEmailSerializer,
    SubscribeSerializer,
    SubscriptionSerializer,
)
from .services import dispatch_bulk_email
from .tasks import send_newsletter_task

logger = logging.getLogger(__name__)

MAX_REPORTED_ERRORS = 5


class SubscriptionViewSet(viewsets.GenericViewSet):
    """Public subscribe endpoint."""
    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "submissions"
    serializer_class = SubscribeSerializer

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        email = serializer.validated_data["email"]

        subscription, created = Subscription.objects.get_or_create(email=email)
        if created:
            logger.info("New newsletter subscriber %s", email)
            return Response(
                {"success": True, "message": "Thank you for subscribing!"},
                status=status.HTTP_201_CREATED,
            )
        if subscription.is_active:
            return Response({"success": True, "message": "You are already subscribed!"})

        subscription.is_active = True
        subscription.save(update_fields=["is_active", "updated_at"])
        return Response({"success": True, "message": "Welcome back! You have been resubscribed."})


class AdminSubscriptionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """List, (de)activate, delete and e-mail subscribers."""
    queryset = Subscription.objects.all().order_by("-created_at")
    serializer_class = SubscriptionSerializer
    permission_classes = [IsStaffOrSuperuser]
    filterset_fields = ["is_active"]

    @action(detail=False, methods=["post"], url_path="batch-delete", serializer_class=BatchDeleteSerializer)
    def batch_delete(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        deleted, _ = Subscription.objects.filter(id__in=serializer.validated_data["ids"]).delete()
        return Response({"success": True, "message": f"{deleted} subscriptions deleted successfully"})

    @action(detail=False, methods=["post"], url_path="bulk-email", serializer_class=BulkEmailSerializer)
    def bulk_email(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        subject = serializer.validated_data["subject"]
        body = serializer.validated_data["body"]

        recipients = Subscription.objects.active_emails()
        if not recipients:
            return Response({"success": False, "message": "No active subscribers found"})

        logger.info("Starting bulk email %r to %d subscribers", subject, len(recipients))

        if serializer.validated_data["background"]:
            task = send_newsletter_task.delay(subject, body)
            return Response(
                {
                    "success": True,
                    "message": f"Bulk email queued for {len(recipients)} subscribers",
                    "task_id": task.id,
                },
                status=status.HTTP_202_ACCEPTED,
            )

        result = dispatch_bulk_email(recipients, subject, body)
        details = {
            "sent": result["sent"],
            "failed": result["failed"],
            "total": len(recipients),
        }
        if result["success"]:
            return Response({
                "success": True,
                "message": f"Email sent successfully to {result['sent']} subscribers",
                "details": details,
            })

        details["errors"] = result["errors"][:MAX_REPORTED_ERRORS]
        return Response(
            {"success": False, "message": "Failed to send some emails", "details": details},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
