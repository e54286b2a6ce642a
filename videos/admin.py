from django.contrib import admin

from .models import HeroVideo


@admin.register(HeroVideo)
class HeroVideoAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "is_active", "size", "created_at")
    list_filter = ("category", "is_active")
    search_fields = ("name", "original_name")
    ordering = ("-created_at",)
    readonly_fields = ("size", "mime_type", "original_name")
