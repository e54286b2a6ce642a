"""
Models for the blog app.
"""
import math

from django.core.validators import URLValidator
from django.db import models

from common.models import TimeStampedModel

WORDS_PER_MINUTE = 200
PREVIEW_LENGTH = 150


def estimate_read_time(content: str) -> int:
    """Minutes to read ``content`` at 200 words per minute, at least one."""
    words = len((content or "").split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    content = content or ""
    if len(content) <= length:
        return content
    return content[:length] + "..."


class BlogPostQuerySet(models.QuerySet):
    def published(self):
        return self.filter(is_published=True)

    def featured(self):
        return self.published().filter(is_featured=True)


class BlogPost(TimeStampedModel):
    CATEGORY_CHOICES = [
        ("Web Security", "Web Security"),
        ("Network Security", "Network Security"),
        ("Penetration Testing", "Penetration Testing"),
        ("Malware Analysis", "Malware Analysis"),
        ("CTF", "CTF"),
        ("Research", "Research"),
        ("Tools", "Tools"),
        ("Other", "Other"),
    ]

    title = models.CharField(max_length=200)
    content = models.TextField()
    author = models.CharField(max_length=150)
    category = models.CharField(max_length=30, choices=CATEGORY_CHOICES, db_index=True)
    tags = models.JSONField(default=list, blank=True)
    image_url = models.CharField(max_length=500, blank=True)
    image_path = models.CharField(max_length=500, blank=True, help_text="Storage key of the uploaded cover image")
    blog_url = models.URLField(
        max_length=500,
        blank=True,
        validators=[URLValidator(schemes=["http", "https"], message="Blog URL must be a valid HTTP/HTTPS URL")],
    )
    is_published = models.BooleanField(default=False, db_index=True)
    is_featured = models.BooleanField(default=False, db_index=True)
    read_time = models.PositiveIntegerField(default=5, help_text="Estimated minutes")
    views = models.PositiveIntegerField(default=0)
    likes = models.PositiveIntegerField(default=0)

    objects = BlogPostQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "blog post"

    def __str__(self) -> str:
        return self.title
