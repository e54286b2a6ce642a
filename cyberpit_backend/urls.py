"""
URL configuration for the CyberPiT site backend.
Public endpoints live under `/api/`; everything an administrator manages is
registered on a separate router under `/api/admin/`.
"""

from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView
from rest_framework.routers import DefaultRouter
from drf_spectacular.views import (
    SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView
)
from django.conf import settings
from django.conf.urls.static import static
from rest_framework_simplejwt.views import TokenBlacklistView, TokenRefreshView

from accounts.views import AdminLoginView, DashboardView
from blog.views import AdminBlogPostViewSet
from contact.views import AdminContactViewSet
from cyberpit_backend.views import health
from feedback.views import AdminFeedbackViewSet
from newsletter.views import AdminSubscriptionViewSet
from projects.views import AdminProjectReportViewSet, AdminProjectViewSet
from team.views import AdminTeamApplicationViewSet, AdminTeamMemberViewSet
from videos.views import AdminHeroVideoViewSet


admin_router = DefaultRouter()
admin_router.register(r"blogs", AdminBlogPostViewSet, basename="admin-blog")
admin_router.register(r"contacts", AdminContactViewSet, basename="admin-contact")
admin_router.register(r"reports", AdminProjectReportViewSet, basename="admin-report")
admin_router.register(r"applications", AdminTeamApplicationViewSet, basename="admin-application")
admin_router.register(r"team", AdminTeamMemberViewSet, basename="admin-team")
admin_router.register(r"projects", AdminProjectViewSet, basename="admin-project")
admin_router.register(r"feedback", AdminFeedbackViewSet, basename="admin-feedback")
admin_router.register(r"subscriptions", AdminSubscriptionViewSet, basename="admin-subscription")
admin_router.register(r"videos", AdminHeroVideoViewSet, basename="admin-video")

urlpatterns = [
    path("admin/", admin.site.urls),

    path("api/", RedirectView.as_view(pattern_name="swagger-ui", permanent=False)),

    #  Swagger/Redoc
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    path("api/health/", health, name="health"),

    # Auth endpoints
    path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("api/auth/logout/", TokenBlacklistView.as_view(), name="logout"),
    path("api/admin/only_admin/login/", AdminLoginView.as_view(), name="admin-login"),
    path("api/admin/dashboard/", DashboardView.as_view(), name="admin-dashboard"),
    path("api/admin/", include(admin_router.urls)),

    path("api/", include("blog.urls")),
    path("api/", include("contact.urls")),
    path("api/", include("feedback.urls")),
    path("api/", include("newsletter.urls")),
    path("api/", include("projects.urls")),
    path("api/", include("team.urls")),
    path("api/", include("videos.urls")),
]

if settings.DEBUG:
    # Only serve MEDIA_URL via Django if it's a local path (avoid trying to serve S3)
    if getattr(settings, "MEDIA_URL", "").startswith("/"):
        urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
