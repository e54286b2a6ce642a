"""
Views for the projects app.

Public visitors browse the showcase and submit their own projects for
review; admins curate both.
"""
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, mixins, permissions, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from common.permissions import IsStaffOrSuperuser
from common.views import ClearAllMixin, SubmissionCreateView
from .models import Project, ProjectReport
from .serializers import ProjectReportSerializer, ProjectReportSubmissionSerializer, ProjectSerializer


class ProjectViewSet(viewsets.ReadOnlyModelViewSet):
    """Non-archived projects, featured first."""
    serializer_class = ProjectSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None
    filterset_fields = ["category", "status", "featured"]

    def get_queryset(self):
        return Project.objects.visible().order_by("-featured", "order", "-created_at")

    @action(detail=False, methods=["get"])
    def featured(self, request):
        qs = Project.objects.visible().filter(featured=True).order_by("-created_at")
        return Response(self.get_serializer(qs, many=True).data)


class ProjectReportCreateView(SubmissionCreateView):
    serializer_class = ProjectReportSubmissionSerializer
    success_message = "Project submitted successfully! Our team will review it and get back to you soon."


class AdminProjectViewSet(viewsets.ModelViewSet):
    queryset = Project.objects.all().order_by("order", "-created_at")
    serializer_class = ProjectSerializer
    permission_classes = [IsStaffOrSuperuser]
    filterset_fields = ["category", "status", "featured"]


class AdminProjectReportViewSet(
    ClearAllMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    queryset = ProjectReport.objects.all().order_by("-created_at")
    serializer_class = ProjectReportSerializer
    permission_classes = [IsStaffOrSuperuser]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    filterset_fields = ["status", "category"]
    search_fields = ["title", "reporter_name", "reporter_email", "description"]
    clear_message = "All reports cleared successfully"
