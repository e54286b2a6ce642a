from django.urls import path

from .views import TeamApplicationCreateView, TeamMemberListView

urlpatterns = [
    path("team/", TeamMemberListView.as_view(), name="team-list"),
    path("team/apply/", TeamApplicationCreateView.as_view(), name="team-apply"),
]
