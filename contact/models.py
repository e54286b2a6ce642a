from django.db import models

from common.models import TimeStampedModel


class ContactMessage(TimeStampedModel):
    """A message sent through the site's contact form."""
    STATUS_UNREAD = "unread"
    STATUS_READ = "read"
    STATUS_REPLIED = "replied"
    STATUS_CHOICES = [
        (STATUS_UNREAD, "Unread"),
        (STATUS_READ, "Read"),
        (STATUS_REPLIED, "Replied"),
    ]

    name = models.CharField(max_length=150)
    email = models.EmailField()
    subject = models.CharField(max_length=255)
    message = models.TextField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_UNREAD, db_index=True)
    admin_response = models.TextField(blank=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "contact message"

    def save(self, *args, **kwargs):
        self.email = (self.email or "").strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name}: {self.subject}"
