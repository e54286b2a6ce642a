from django.contrib import admin

from .models import Project, ProjectReport


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "status", "featured", "order", "created_at")
    list_filter = ("status", "featured", "category")
    search_fields = ("title", "description")
    ordering = ("order", "-created_at")


@admin.register(ProjectReport)
class ProjectReportAdmin(admin.ModelAdmin):
    list_display = ("title", "reporter_name", "category", "status", "created_at")
    list_filter = ("status", "category")
    search_fields = ("title", "reporter_name", "reporter_email")
