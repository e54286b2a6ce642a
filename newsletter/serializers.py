"""
Serializers for the newsletter app.
"""
from rest_framework import serializers

from .models import Subscription


class SubscribeSerializer(serializers.Serializer):
    email = serializers.EmailField()

    def validate_email(self, value: str) -> str:
        return value.strip().lower()


class SubscriptionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Subscription
        fields = ["id", "email", "is_active", "created_at", "updated_at"]
        read_only_fields = ["id", "email", "created_at", "updated_at"]


class BatchDeleteSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.IntegerField(min_value=1), allow_empty=False)


class BulkEmailSerializer(serializers.Serializer):
    subject = serializers.CharField(max_length=255)
    body = serializers.CharField()
    background = serializers.BooleanField(default=False)
