from django.contrib import admin

from .models import BlogPost


@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = ("title", "author", "category", "is_published", "is_featured", "views", "likes", "created_at")
    list_filter = ("category", "is_published", "is_featured")
    search_fields = ("title", "content", "author")
    readonly_fields = ("views", "likes", "read_time")
    ordering = ("-created_at",)
