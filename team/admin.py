from django.contrib import admin

from .models import TeamApplication, TeamMember


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    list_display = ("name", "role", "order", "is_active")
    list_editable = ("order", "is_active")
    search_fields = ("name", "role")


@admin.register(TeamApplication)
class TeamApplicationAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "interest", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("name", "email", "interest")
