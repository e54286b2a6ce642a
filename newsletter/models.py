"""
Models for the newsletter app.

``Subscription`` stores one row per e-mail address.  Admins unsubscribe a
reader by flipping ``is_active`` instead of deleting, so a returning reader
is "resubscribed" rather than created twice.
"""
from django.db import models

from common.models import TimeStampedModel


class SubscriptionQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def active_emails(self) -> list[str]:
        return list(self.active().order_by("created_at").values_list("email", flat=True))


class Subscription(TimeStampedModel):
    email = models.EmailField(unique=True)
    is_active = models.BooleanField(default=True, db_index=True)

    objects = SubscriptionQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]

    def save(self, *args, **kwargs):
        self.email = (self.email or "").strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        state = "active" if self.is_active else "inactive"
        return f"{self.email} ({state})"
