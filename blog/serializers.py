"""
Serializers for the blog app.

``BlogPostSerializer`` is the full post (detail views and admin writes);
``BlogPostPreviewSerializer`` is used for listings and cuts the content
down to a short preview.
"""
from django.conf import settings
from rest_framework import serializers

from common.serializers import TagListField
from .models import BlogPost, estimate_read_time, preview

POST_FIELDS = [
    "id", "title", "content", "author", "category", "tags",
    "image_url", "image_path", "blog_url", "is_published", "is_featured",
    "read_time", "views", "likes", "created_at", "updated_at",
]


class BlogPostSerializer(serializers.ModelSerializer):
    tags = TagListField(required=False)

    class Meta:
        model = BlogPost
        fields = POST_FIELDS
        read_only_fields = ["id", "read_time", "views", "likes", "created_at", "updated_at"]

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Blog title is required")
        return value

    def validate_blog_url(self, value):
        if value and not value.lower().startswith(("http://", "https://")):
            raise serializers.ValidationError("Blog URL must be a valid HTTP/HTTPS URL")
        return value

    def validate(self, attrs):
        if "content" in attrs:
            attrs["read_time"] = estimate_read_time(attrs["content"])
        return attrs


class BlogPostPreviewSerializer(BlogPostSerializer):
    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["content"] = preview(instance.content)
        return data


class BlogImageUploadSerializer(serializers.Serializer):
    image = serializers.ImageField(error_messages={"required": "No image file provided"})

    def validate_image(self, value):
        content_type = getattr(value, "content_type", "") or ""
        if not content_type.startswith("image/"):
            raise serializers.ValidationError("Only image files are allowed")
        if value.size > settings.MAX_IMAGE_UPLOAD_BYTES:
            raise serializers.ValidationError("Image file is too large")
        return value
