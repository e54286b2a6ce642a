from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import ProjectReportCreateView, ProjectViewSet

router = DefaultRouter()
router.register(r"projects", ProjectViewSet, basename="project")

urlpatterns = router.urls + [
    path("reports/", ProjectReportCreateView.as_view(), name="report-create"),
]
