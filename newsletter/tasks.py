# newsletter/tasks.py
import logging

from celery import shared_task

from .models import Subscription
from .services import dispatch_bulk_email

logger = logging.getLogger(__name__)


@shared_task(max_retries=0)
def send_newsletter_task(subject: str, body: str) -> dict:
    """Broadcast to every active subscriber off the request thread."""
    recipients = Subscription.objects.active_emails()
    if not recipients:
        logger.info("Newsletter skipped: no active subscribers")
        return {"success": False, "sent": 0, "failed": 0, "errors": [], "total": 0}
    result = dispatch_bulk_email(recipients, subject, body)
    result["total"] = len(recipients)
    return result
