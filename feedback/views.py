"""
Views for the feedback app.
"""
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from common.permissions import IsStaffOrSuperuser
from .models import Feedback
from .serializers import FeedbackSerializer, PublicFeedbackSerializer


class FeedbackViewSet(mixins.ListModelMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    """Public testimonials: featured first, newest first; anyone may submit."""
    queryset = Feedback.objects.all().order_by("-featured", "-created_at")
    serializer_class = PublicFeedbackSerializer
    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    throttle_scope = "submissions"
    filterset_fields = ["featured", "rating"]

    def get_throttles(self):
        if self.action == "create":
            return [ScopedRateThrottle()]
        return super().get_throttles()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(
            {
                "success": True,
                "message": "Thank you for your feedback! It will be reviewed before being published.",
            },
            status=status.HTTP_201_CREATED,
        )


class AdminFeedbackViewSet(viewsets.ModelViewSet):
    queryset = Feedback.objects.all().order_by("-created_at")
    serializer_class = FeedbackSerializer
    permission_classes = [IsStaffOrSuperuser]
    filterset_fields = ["featured", "rating"]
