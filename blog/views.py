"""
ViewSets for the blog app.

``BlogPostViewSet`` is the public reader API: only published posts, with
``search``, ``category`` and ``featured`` query parameters and a
``pagination`` summary block.  ``AdminBlogPostViewSet`` gives admins full
CRUD over every post plus cover image uploads to blob storage.
"""
import logging

from django.core.files.storage import default_storage
from django.db.models import F, Q
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response

from common.pagination import SummaryPagination
from common.permissions import IsStaffOrSuperuser
from common.storage import delete_blob, unique_blob_name
from .models import BlogPost
from .serializers import BlogImageUploadSerializer, BlogPostPreviewSerializer, BlogPostSerializer

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 3
IMAGE_FOLDER = "blog-images"


class BlogPagination(SummaryPagination):
    page_size = 9


class AdminBlogPagination(SummaryPagination):
    page_size = 10


class BlogPostViewSet(viewsets.ReadOnlyModelViewSet):
    permission_classes = [permissions.AllowAny]
    pagination_class = BlogPagination
    filter_backends = []

    def get_serializer_class(self):
        if self.action == "retrieve":
            return BlogPostSerializer
        return BlogPostPreviewSerializer

    def get_queryset(self):
        qs = BlogPost.objects.published()
        if self.action != "list":
            return qs

        params = self.request.query_params
        search = (params.get("search") or "").strip()
        if search:
            qs = qs.filter(
                Q(title__icontains=search) | Q(content__icontains=search) | Q(tags__icontains=search)
            )
        category = (params.get("category") or "").strip()
        if category and category.lower() != "all":
            qs = qs.filter(category=category)
        if params.get("featured") == "true":
            qs = qs.filter(is_featured=True)
        return qs.order_by("-created_at")

    def retrieve(self, request, *args, **kwargs):
        post = self.get_object()
        BlogPost.objects.filter(pk=post.pk).update(views=F("views") + 1)
        post.refresh_from_db(fields=["views"])
        return Response(self.get_serializer(post).data)

    @action(detail=False, methods=["get"])
    def featured(self, request):
        posts = BlogPost.objects.featured().order_by("-created_at")[:FEATURED_LIMIT]
        return Response(BlogPostPreviewSerializer(posts, many=True).data)

    @action(detail=False, methods=["get"])
    def categories(self, request):
        categories = (
            BlogPost.objects.published()
            .order_by("category")
            .values_list("category", flat=True)
            .distinct()
        )
        return Response({"success": True, "categories": list(categories)})

    @action(detail=True, methods=["post"])
    def like(self, request, pk=None):
        post = self.get_object()
        BlogPost.objects.filter(pk=post.pk).update(likes=F("likes") + 1)
        post.refresh_from_db(fields=["likes"])
        return Response({"success": True, "likes": post.likes})


class AdminBlogPostViewSet(viewsets.ModelViewSet):
    permission_classes = [IsStaffOrSuperuser]
    pagination_class = AdminBlogPagination
    filterset_fields = ["category", "is_published", "is_featured"]

    def get_serializer_class(self):
        if self.action == "list":
            return BlogPostPreviewSerializer
        if self.action == "upload_image":
            return BlogImageUploadSerializer
        return BlogPostSerializer

    def get_queryset(self):
        qs = BlogPost.objects.all().order_by("-created_at")
        search = (self.request.query_params.get("search") or "").strip()
        if self.action == "list" and search:
            qs = qs.filter(
                Q(title__icontains=search)
                | Q(content__icontains=search)
                | Q(author__icontains=search)
                | Q(category__icontains=search)
                | Q(tags__icontains=search)
            )
        return qs

    def perform_create(self, serializer):
        post = serializer.save()
        logger.info("Blog post %s created (published=%s)", post.pk, post.is_published)

    def perform_update(self, serializer):
        old_image = serializer.instance.image_path
        post = serializer.save()
        if old_image and old_image != post.image_path:
            delete_blob(old_image)

    def perform_destroy(self, instance):
        image_path = instance.image_path
        instance.delete()
        if image_path:
            delete_blob(image_path)

    @action(
        detail=False,
        methods=["post"],
        url_path="upload-image",
        parser_classes=[MultiPartParser, FormParser],
    )
    def upload_image(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        image = serializer.validated_data["image"]
        try:
            path = default_storage.save(unique_blob_name(IMAGE_FOLDER, image.name), image)
        except Exception:
            logger.exception("Blog image upload failed")
            return Response(
                {"success": False, "message": "Failed to upload image"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(
            {
                "success": True,
                "message": "Image uploaded successfully",
                "image_url": default_storage.url(path),
                "image_path": path,
            },
            status=status.HTTP_201_CREATED,
        )
