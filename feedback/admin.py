from django.contrib import admin

from .models import Feedback


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ("name", "workplace", "rating", "featured", "created_at")
    list_filter = ("featured", "rating")
    search_fields = ("name", "email", "comment")
    list_editable = ("featured",)
