"""
Models for the projects app.

``Project`` is the showcase entry displayed on the site; ``ProjectReport``
is a project submitted by a visitor for the team to review.
"""
from django.db import models

from common.models import TimeStampedModel


class ProjectQuerySet(models.QuerySet):
    def visible(self):
        return self.exclude(status=Project.STATUS_ARCHIVED)


class Project(TimeStampedModel):
    STATUS_ACTIVE = "active"
    STATUS_UPCOMING = "upcoming"
    STATUS_COMPLETED = "completed"
    STATUS_ARCHIVED = "archived"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_UPCOMING, "Upcoming"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_ARCHIVED, "Archived"),
    ]

    title = models.CharField(max_length=200)
    date = models.CharField(max_length=50, help_text="Free text, e.g. 'March 2024'")
    category = models.CharField(max_length=100)
    description = models.TextField()
    image = models.CharField(max_length=500)
    tags = models.JSONField(default=list, blank=True)
    link = models.CharField(max_length=500, default="#", blank=True)
    featured = models.BooleanField(default=False)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_COMPLETED)
    order = models.IntegerField(default=0)

    objects = ProjectQuerySet.as_manager()

    class Meta:
        ordering = ["order", "-created_at"]
        indexes = [
            models.Index(fields=["order", "created_at"], name="projects_pr_order_3c1f0e_idx"),
            models.Index(fields=["featured", "status"], name="projects_pr_feature_8d2a41_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class ProjectReport(TimeStampedModel):
    STATUS_NEW = "new"
    STATUS_REVIEWING = "reviewing"
    STATUS_APPROVED = "approved"
    STATUS_FEATURED = "featured"
    STATUS_REJECTED = "rejected"
    STATUS_CHOICES = [
        (STATUS_NEW, "New"),
        (STATUS_REVIEWING, "Reviewing"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_FEATURED, "Featured"),
        (STATUS_REJECTED, "Rejected"),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField()
    reporter_name = models.CharField(max_length=150)
    reporter_email = models.EmailField()
    category = models.CharField(max_length=100)
    project_url = models.URLField(max_length=500)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_NEW, db_index=True)
    admin_notes = models.TextField(blank=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "project report"

    def save(self, *args, **kwargs):
        self.reporter_email = (self.reporter_email or "").strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.title} by {self.reporter_name}"
