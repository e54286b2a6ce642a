from rest_framework import serializers

from common.serializers import TagListField
from .models import Project, ProjectReport


class ProjectSerializer(serializers.ModelSerializer):
    tags = TagListField(required=False)

    class Meta:
        model = Project
        fields = [
            "id", "title", "date", "category", "description", "image", "tags",
            "link", "featured", "status", "order", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_link(self, value):
        return value.strip() or "#"


class ProjectReportSubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProjectReport
        fields = ["title", "description", "reporter_name", "reporter_email", "category", "project_url"]


class ProjectReportSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProjectReport
        fields = [
            "id", "title", "description", "reporter_name", "reporter_email", "category",
            "project_url", "status", "admin_notes", "created_at", "updated_at",
        ]
        read_only_fields = [
            "id", "title", "description", "reporter_name", "reporter_email",
            "category", "project_url", "created_at", "updated_at",
        ]
