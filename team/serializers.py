from rest_framework import serializers

from .models import TeamApplication, TeamMember


class TeamMemberSerializer(serializers.ModelSerializer):
    class Meta:
        model = TeamMember
        fields = ["id", "name", "role", "image", "bio", "order", "is_active", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]


class TeamApplicationSubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = TeamApplication
        fields = ["name", "email", "phone", "linkedin", "interest", "comment"]


class TeamApplicationSerializer(serializers.ModelSerializer):
    class Meta:
        model = TeamApplication
        fields = [
            "id", "name", "email", "phone", "linkedin", "interest", "comment",
            "status", "admin_notes", "created_at", "updated_at",
        ]
        read_only_fields = [
            "id", "name", "email", "phone", "linkedin", "interest", "comment",
            "created_at", "updated_at",
        ]
