from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, mixins, permissions, viewsets

from common.permissions import IsStaffOrSuperuser
from common.views import ClearAllMixin, SubmissionCreateView
from .models import TeamApplication, TeamMember
from .serializers import (
    TeamApplicationSerializer,
    TeamApplicationSubmissionSerializer,
    TeamMemberSerializer,
)


class TeamMemberListView(generics.ListAPIView):
    """Active roster in display order."""
    queryset = TeamMember.objects.filter(is_active=True).order_by("order", "created_at")
    serializer_class = TeamMemberSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None


class TeamApplicationCreateView(SubmissionCreateView):
    serializer_class = TeamApplicationSubmissionSerializer
    success_message = "Your application has been submitted successfully! We will review it and get back to you."


class AdminTeamMemberViewSet(viewsets.ModelViewSet):
    queryset = TeamMember.objects.all().order_by("order", "created_at")
    serializer_class = TeamMemberSerializer
    permission_classes = [IsStaffOrSuperuser]
    filterset_fields = ["is_active"]


class AdminTeamApplicationViewSet(
    ClearAllMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    queryset = TeamApplication.objects.all().order_by("-created_at")
    serializer_class = TeamApplicationSerializer
    permission_classes = [IsStaffOrSuperuser]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ["status"]
    search_fields = ["name", "email", "interest"]
    clear_message = "All applications cleared successfully"
