from rest_framework import serializers

from .models import ContactMessage


class ContactSubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = ["name", "email", "subject", "message"]


class ContactMessageSerializer(serializers.ModelSerializer):
    """Admin view of a message; only status and response are editable."""

    class Meta:
        model = ContactMessage
        fields = [
            "id", "name", "email", "subject", "message",
            "status", "admin_response", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "name", "email", "subject", "message", "created_at", "updated_at"]
