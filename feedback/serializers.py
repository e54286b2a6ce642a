from rest_framework import serializers

from .models import Feedback


class PublicFeedbackSerializer(serializers.ModelSerializer):
    """Testimonial as shown on the site; the e-mail address stays private."""

    email = serializers.EmailField(write_only=True)

    class Meta:
        model = Feedback
        fields = ["id", "name", "email", "role", "workplace", "comment", "rating", "featured", "created_at"]
        read_only_fields = ["id", "featured", "created_at"]


class FeedbackSerializer(serializers.ModelSerializer):
    class Meta:
        model = Feedback
        fields = [
            "id", "name", "email", "role", "workplace", "comment",
            "rating", "featured", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
