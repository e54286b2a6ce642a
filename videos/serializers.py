"""
Serializers for the videos app.
"""
from django.conf import settings
from rest_framework import serializers

from .models import HeroVideo


class HeroVideoSerializer(serializers.ModelSerializer):
    url = serializers.SerializerMethodField()

    class Meta:
        model = HeroVideo
        fields = [
            "id", "name", "category", "url", "original_name",
            "size", "mime_type", "is_active", "created_at", "updated_at",
        ]
        read_only_fields = fields

    def get_url(self, obj):
        if not obj.file:
            return None
        return obj.file.url


class HeroVideoUploadSerializer(serializers.Serializer):
    video = serializers.FileField(error_messages={"required": "No video file provided"})
    type = serializers.ChoiceField(
        choices=HeroVideo.CATEGORY_CHOICES,
        error_messages={"invalid_choice": "Invalid video type"},
    )
    name = serializers.CharField(max_length=255, required=False, allow_blank=True)

    def validate_video(self, value):
        content_type = getattr(value, "content_type", "") or ""
        if not content_type.startswith("video/"):
            raise serializers.ValidationError("Only video files are allowed")
        if value.size > settings.MAX_VIDEO_UPLOAD_BYTES:
            raise serializers.ValidationError("Video file is too large")
        return value
