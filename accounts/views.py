"""
Views for the accounts app.
"""
import logging

from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView

from blog.models import BlogPost
from common.permissions import IsStaffOrSuperuser
from contact.models import ContactMessage
from feedback.models import Feedback
from newsletter.models import Subscription
from projects.models import Project, ProjectReport
from team.models import TeamApplication, TeamMember
from videos.models import HeroVideo
from .serializers import AdminLoginSerializer

logger = logging.getLogger(__name__)


class AdminLoginView(TokenObtainPairView):
    """Obtain JWT tokens for a staff account using email + password."""
    permission_classes = [permissions.AllowAny]
    serializer_class = AdminLoginSerializer
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "submissions"


class DashboardView(APIView):
    """Headline counts for the admin dashboard."""
    permission_classes = [IsStaffOrSuperuser]

    def get(self, request):
        stats = {
            "contacts": ContactMessage.objects.count(),
            "unread_contacts": ContactMessage.objects.filter(status=ContactMessage.STATUS_UNREAD).count(),
            "subscriptions": Subscription.objects.active().count(),
            "team_applications": TeamApplication.objects.count(),
            "pending_applications": TeamApplication.objects.filter(status=TeamApplication.STATUS_NEW).count(),
            "team_members": TeamMember.objects.filter(is_active=True).count(),
            "projects": Project.objects.visible().count(),
            "reports": ProjectReport.objects.count(),
            "new_reports": ProjectReport.objects.filter(status=ProjectReport.STATUS_NEW).count(),
            "feedback": Feedback.objects.count(),
            "blogs": BlogPost.objects.count(),
            "published_blogs": BlogPost.objects.published().count(),
            "videos": HeroVideo.objects.active().count(),
        }
        return Response({"success": True, "stats": stats})
