"""
Models for the videos app.

``HeroVideo`` is the background video shown on the landing page, one per
device category.  Superseded videos are kept (inactive) for history; the
partial unique constraint guarantees that at most one row per category is
active at any committed point in time.
"""
from django.db import models, transaction
from django.db.models import Q

from common.models import TimeStampedModel
from common.storage import unique_blob_name


def hero_video_upload_path(instance, filename):
    return unique_blob_name(f"videos/{instance.category}", filename)


class HeroVideoQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def of_category(self, category):
        return self.filter(category=category)

    def deactivate_category(self, category, exclude_pk=None) -> int:
        qs = self.filter(category=category, is_active=True)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.update(is_active=False)


class HeroVideo(TimeStampedModel):
    CATEGORY_DESKTOP = "desktop"
    CATEGORY_MOBILE = "mobile"
    CATEGORY_CHOICES = [
        (CATEGORY_DESKTOP, "Desktop"),
        (CATEGORY_MOBILE, "Mobile"),
    ]

    name = models.CharField(max_length=255)
    category = models.CharField(max_length=10, choices=CATEGORY_CHOICES, db_index=True)
    file = models.FileField(upload_to=hero_video_upload_path, max_length=500)
    original_name = models.CharField(max_length=255, blank=True)
    size = models.PositiveBigIntegerField(default=0)
    mime_type = models.CharField(max_length=100, blank=True)
    is_active = models.BooleanField(default=True)

    objects = HeroVideoQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["category"],
                condition=Q(is_active=True),
                name="one_active_video_per_category",
            ),
        ]

    def __str__(self) -> str:
        flag = "active" if self.is_active else "inactive"
        return f"{self.name} [{self.category}, {flag}]"

    @transaction.atomic
    def activate(self):
        """Make this the live video of its category, deactivating siblings first."""
        type(self).objects.deactivate_category(self.category, exclude_pk=self.pk)
        if not self.is_active:
            self.is_active = True
            self.save(update_fields=["is_active", "updated_at"])

    @transaction.atomic
    def deactivate(self):
        if self.is_active:
            self.is_active = False
            self.save(update_fields=["is_active", "updated_at"])
