"""
Models for the team app: the public roster and applications to join it.
"""
from django.db import models

from common.models import TimeStampedModel


class TeamMember(TimeStampedModel):
    name = models.CharField(max_length=150)
    role = models.CharField(max_length=150)
    image = models.CharField(max_length=500)
    bio = models.TextField()
    order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ["order", "created_at"]
        indexes = [models.Index(fields=["order", "created_at"], name="team_member_order_idx")]

    def __str__(self) -> str:
        return f"{self.name} ({self.role})"


class TeamApplication(TimeStampedModel):
    STATUS_NEW = "new"
    STATUS_REVIEWING = "reviewing"
    STATUS_ACCEPTED = "accepted"
    STATUS_REJECTED = "rejected"
    STATUS_CHOICES = [
        (STATUS_NEW, "New"),
        (STATUS_REVIEWING, "Reviewing"),
        (STATUS_ACCEPTED, "Accepted"),
        (STATUS_REJECTED, "Rejected"),
    ]

    name = models.CharField(max_length=150)
    email = models.EmailField()
    phone = models.CharField(max_length=40)
    linkedin = models.CharField(max_length=300, blank=True)
    interest = models.CharField(max_length=200)
    comment = models.TextField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_NEW, db_index=True)
    admin_notes = models.TextField(blank=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "team application"

    def save(self, *args, **kwargs):
        self.email = (self.email or "").strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
