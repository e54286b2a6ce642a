"""
Bulk e-mail delivery for newsletter broadcasts.

Recipients are split into fixed-size batches.  Every send inside a batch
runs concurrently on a thread pool and the whole batch is awaited before
the next one starts; consecutive batches are separated by a cooldown so
the provider's rate limit is respected.  A failed recipient is recorded
on the outcome and never aborts the run.

Provider settings are read once into an immutable ``BrevoConfig`` and
handed to the dispatcher when it is built, so tests can swap in their
own configuration, HTTP client and sleep function.
"""
from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Sequence

import requests
from django.conf import settings
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)

BATCH_SIZE = 10
BATCH_DELAY_SECS = 2.0
EMAIL_TEMPLATE = "emails/newsletter.html"
MISSING_API_KEY = "Brevo API key not configured"


class ConfigurationError(Exception):
    """The e-mail provider cannot be used (e.g. no API key)."""


class RecipientSendError(Exception):
    """A single recipient could not be sent to."""

    def __init__(self, recipient: str, reason: str):
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Failed to send to {recipient}: {reason}")


@dataclass(frozen=True)
class BrevoConfig:
    api_key: str
    sender_email: str
    sender_name: str
    api_url: str = "https://api.brevo.com/v3/smtp/email"
    timeout: float = 15.0

    @classmethod
    def from_settings(cls) -> "BrevoConfig":
        return cls(
            api_key=(getattr(settings, "BREVO_API_KEY", "") or "").strip(),
            sender_email=settings.BREVO_SENDER_EMAIL,
            sender_name=settings.BREVO_SENDER_NAME,
            api_url=settings.BREVO_API_URL,
            timeout=float(settings.BREVO_TIMEOUT_SECS),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def require(self) -> None:
        if not self.is_configured:
            raise ConfigurationError(MISSING_API_KEY)


@dataclass
class DispatchOutcome:
    """Running tally for one dispatch call."""

    sent: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)
    configuration_error: str | None = None

    @property
    def success(self) -> bool:
        return self.configuration_error is None and self.failed == 0

    def record_sent(self) -> None:
        self.sent += 1

    def record_failure(self, error: RecipientSendError) -> None:
        self.failed += 1
        self.errors.append(str(error))

    def as_dict(self) -> dict:
        return {
            "success": self.success,
            "sent": self.sent,
            "failed": self.failed,
            "errors": list(self.errors),
        }

    @classmethod
    def misconfigured(cls, message: str) -> "DispatchOutcome":
        return cls(errors=[message], configuration_error=message)


def _failure_reason(response) -> str:
    """Prefer the provider's own ``message``; fall back to the HTTP status."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    reason = getattr(response, "reason", "") or ""
    return f"HTTP {response.status_code} {reason}".strip()


class BulkEmailDispatcher:
    """
    Sends one rendered message to many recipients through Brevo.

    ``http`` only needs a ``post(url, json=..., headers=..., timeout=...)``
    method (the ``requests`` module or a ``requests.Session``), and
    ``sleep`` is the cooldown function called between batches.
    """

    def __init__(
        self,
        config: BrevoConfig,
        http=requests,
        sleep=time.sleep,
        batch_size: int = BATCH_SIZE,
        batch_delay: float = BATCH_DELAY_SECS,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.config = config
        self.http = http
        self.sleep = sleep
        self.batch_size = batch_size
        self.batch_delay = batch_delay

    def render(self, subject: str, body: str) -> str:
        return render_to_string(EMAIL_TEMPLATE, {"subject": subject, "body": body})

    def batches(self, recipients: Sequence[str]) -> list[list[str]]:
        return [
            list(recipients[i:i + self.batch_size])
            for i in range(0, len(recipients), self.batch_size)
        ]

    def send_one(self, recipient: str, subject: str, html: str) -> str | None:
        """POST a single message; returns the provider message id or raises ``RecipientSendError``."""
        payload = {
            "sender": {"name": self.config.sender_name, "email": self.config.sender_email},
            "to": [{"email": recipient}],
            "subject": subject,
            "htmlContent": html,
        }
        headers = {
            "accept": "application/json",
            "api-key": self.config.api_key,
            "content-type": "application/json",
        }
        try:
            response = self.http.post(
                self.config.api_url, json=payload, headers=headers, timeout=self.config.timeout
            )
        except requests.RequestException as exc:
            raise RecipientSendError(recipient, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            raise RecipientSendError(recipient, _failure_reason(response))

        try:
            data = response.json()
        except ValueError as exc:
            raise RecipientSendError(recipient, "Malformed provider response") from exc
        if not isinstance(data, dict):
            raise RecipientSendError(recipient, "Malformed provider response")
        return data.get("messageId")

    def dispatch(self, recipients: Sequence[str], subject: str, body: str) -> DispatchOutcome:
        recipients = list(recipients)
        if not recipients:
            raise ValueError("At least one recipient is required")
        if not (subject or "").strip() or not (body or "").strip():
            raise ValueError("Subject and body are required")

        try:
            self.config.require()
        except ConfigurationError as exc:
            logger.error("Bulk email aborted: %s", exc)
            return DispatchOutcome.misconfigured(str(exc))

        html = self.render(subject, body)
        batches = self.batches(recipients)
        outcome = DispatchOutcome()
        logger.info(
            "Sending bulk email to %d subscribers in %d batches", len(recipients), len(batches)
        )

        with ThreadPoolExecutor(max_workers=self.batch_size, thread_name_prefix="brevo") as pool:
            for index, batch in enumerate(batches, start=1):
                logger.info("Processing batch %d/%d (%d emails)", index, len(batches), len(batch))
                futures = [
                    (recipient, pool.submit(self.send_one, recipient, subject, html))
                    for recipient in batch
                ]
                for recipient, future in futures:
                    try:
                        message_id = future.result()
                    except RecipientSendError as exc:
                        outcome.record_failure(exc)
                        logger.error("%s", exc)
                    except Exception as exc:
                        outcome.record_failure(RecipientSendError(recipient, str(exc)))
                        logger.exception("Unexpected error sending to %s", recipient)
                    else:
                        outcome.record_sent()
                        logger.info("Email sent to %s (ID: %s)", recipient, message_id)

                if index < len(batches):
                    logger.debug("Waiting %.1fs before next batch", self.batch_delay)
                    self.sleep(self.batch_delay)

        logger.info("Bulk email summary: %d sent, %d failed", outcome.sent, outcome.failed)
        return outcome


def dispatch_bulk_email(
    recipients: Sequence[str],
    subject: str,
    body: str,
    dispatcher: BulkEmailDispatcher | None = None,
) -> dict:
    """Send ``subject``/``body`` to every recipient; returns ``{success, sent, failed, errors}``."""
    dispatcher = dispatcher or BulkEmailDispatcher(BrevoConfig.from_settings())
    return dispatcher.dispatch(recipients, subject, body).as_dict()
