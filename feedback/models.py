"""
Testimonials left by visitors.  Admins mark the best ones ``featured``
so they are listed first on the site.
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from common.models import TimeStampedModel


class Feedback(TimeStampedModel):
    name = models.CharField(max_length=150)
    email = models.EmailField()
    role = models.CharField(max_length=150, blank=True)
    workplace = models.CharField(max_length=150, blank=True)
    comment = models.TextField()
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    featured = models.BooleanField(default=False, db_index=True)

    class Meta:
        ordering = ["-featured", "-created_at"]
        verbose_name = "feedback"
        verbose_name_plural = "feedback"

    def save(self, *args, **kwargs):
        self.email = (self.email or "").strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} ({self.rating}/5)"
