"""
Views for the videos app.

``current_videos`` is what the landing page polls; the admin viewset
uploads, toggles and deletes hero videos through ``videos.services``.
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import mixins, serializers, status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from common.permissions import IsStaffOrSuperuser
from .models import HeroVideo
from .serializers import HeroVideoSerializer, HeroVideoUploadSerializer
from .services import (
    AssetStorageError,
    current_sources,
    delete_asset,
    replace_active_asset,
    toggle_asset_active,
)

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([AllowAny])
def current_videos(request):
    return Response({"success": True, "videos": current_sources()})


class AdminHeroVideoViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    queryset = HeroVideo.objects.all().order_by("-created_at")
    serializer_class = HeroVideoSerializer
    permission_classes = [IsStaffOrSuperuser]
    filterset_fields = ["category", "is_active"]

    @action(
        detail=False,
        methods=["post"],
        parser_classes=[MultiPartParser, FormParser],
        serializer_class=HeroVideoUploadSerializer,
    )
    def upload(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        upload = data["video"]
        try:
            video = replace_active_asset(
                data["type"],
                upload,
                name=data.get("name"),
                original_name=upload.name,
                size=upload.size,
                mime_type=upload.content_type,
            )
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)
        except AssetStorageError:
            logger.exception("Video upload failed")
            return Response(
                {"success": False, "message": "Failed to upload video"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(
            {
                "success": True,
                "message": f"{video.category} video uploaded successfully",
                "video": HeroVideoSerializer(video, context=self.get_serializer_context()).data,
            },
            status=status.HTTP_201_CREATED,
        )

    @action(detail=True, methods=["post"], url_path="toggle-active")
    def toggle_active(self, request, pk=None):
        # no body flips the flag; {"is_active": bool} sets it
        is_active = request.data.get("is_active")
        if is_active is not None:
            is_active = serializers.BooleanField().to_internal_value(is_active)
        try:
            video = toggle_asset_active(pk, is_active)
        except (HeroVideo.DoesNotExist, ValueError):
            raise Http404
        return Response({"success": True, "video": HeroVideoSerializer(video).data})

    def destroy(self, request, *args, **kwargs):
        video = self.get_object()
        delete_asset(video.pk)
        return Response({"success": True, "message": "Video deleted successfully"})
