"""
Tests for the bulk e-mail dispatcher.

The dispatcher gets an explicit configuration, the ``fake_brevo`` HTTP
double and a recording sleep function, so no network or real waiting
happens.
"""
import threading

import pytest
import requests

from newsletter.services import (
    BrevoConfig,
    BulkEmailDispatcher,
    ConfigurationError,
    RecipientSendError,
    dispatch_bulk_email,
)

CONFIG = BrevoConfig(
    api_key="xkeysib-test",
    sender_email="administrator@cyberpit.live",
    sender_name="CyberPiT Team",
    api_url="https://api.brevo.test/v3/smtp/email",
    timeout=5,
)


def _recipients(n):
    return [f"reader{i}@example.com" for i in range(n)]


class RecordingSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def sleeper():
    return RecordingSleep()


@pytest.fixture
def dispatcher(fake_brevo, sleeper):
    return BulkEmailDispatcher(CONFIG, http=fake_brevo, sleep=sleeper)


def test_all_sends_succeed(dispatcher, fake_brevo):
    outcome = dispatcher.dispatch(_recipients(7), "Hello", "Line one\nLine two")
    assert outcome.success is True
    assert outcome.sent == 7
    assert outcome.failed == 0
    assert outcome.errors == []
    assert sorted(fake_brevo.recipients) == sorted(_recipients(7))


def test_twenty_five_recipients_make_three_batches(fake_brevo, sleeper):
    batch_sizes = []

    class CountingDispatcher(BulkEmailDispatcher):
        def batches(self, recipients):
            groups = super().batches(recipients)
            batch_sizes.extend(len(g) for g in groups)
            return groups

    outcome = CountingDispatcher(CONFIG, http=fake_brevo, sleep=sleeper).dispatch(
        _recipients(25), "Update", "Body"
    )
    assert batch_sizes == [10, 10, 5]
    assert sleeper.calls == [2.0, 2.0]
    assert outcome.sent == 25
    assert len(fake_brevo.calls) == 25


def test_batches_are_fully_resolved_before_cooldown(fake_brevo):
    seen_at_sleep = []

    def sleep(seconds):
        seen_at_sleep.append(len(fake_brevo.calls))

    BulkEmailDispatcher(CONFIG, http=fake_brevo, sleep=sleep).dispatch(_recipients(25), "S", "B")
    assert seen_at_sleep == [10, 20]


def test_sends_within_a_batch_run_concurrently(fake_brevo, sleeper):
    # every send blocks until all ten of the batch are in flight
    barrier = threading.Barrier(10, timeout=5)

    class GatedBrevo:
        def post(self, url, **kwargs):
            barrier.wait()
            return fake_brevo.post(url, **kwargs)

    outcome = BulkEmailDispatcher(CONFIG, http=GatedBrevo(), sleep=sleeper).dispatch(
        _recipients(10), "S", "B"
    )
    assert outcome.sent == 10
    assert outcome.failed == 0
    assert not barrier.broken


def test_single_batch_never_sleeps(dispatcher, sleeper):
    dispatcher.dispatch(_recipients(10), "S", "B")
    assert sleeper.calls == []


def test_failures_are_counted_and_described(dispatcher, fake_brevo):
    recipients = _recipients(12)
    fake_brevo.fail_for = {recipients[1], recipients[11]}

    outcome = dispatcher.dispatch(recipients, "S", "B")

    assert outcome.success is False
    assert outcome.sent == 10
    assert outcome.failed == 2
    assert outcome.errors == [
        f"Failed to send to {recipients[1]}: Invalid email address",
        f"Failed to send to {recipients[11]}: Invalid email address",
    ]
    assert len(fake_brevo.calls) == 12


def test_transport_errors_are_recorded(sleeper):
    class BrokenHttp:
        def post(self, url, **kwargs):
            raise requests.ConnectionError("connection refused")

    outcome = BulkEmailDispatcher(CONFIG, http=BrokenHttp(), sleep=sleeper).dispatch(
        ["a@example.com", "b@example.com"], "S", "B"
    )
    assert outcome.failed == 2
    assert outcome.sent == 0
    assert outcome.errors[0] == "Failed to send to a@example.com: connection refused"


def test_missing_api_key_makes_no_network_calls(fake_brevo, sleeper):
    config = BrevoConfig(api_key="", sender_email="a@b.c", sender_name="X")
    outcome = BulkEmailDispatcher(config, http=fake_brevo, sleep=sleeper).dispatch(
        _recipients(3), "S", "B"
    )
    assert outcome.success is False
    assert outcome.sent == 0
    assert outcome.failed == 0
    assert outcome.errors == ["Brevo API key not configured"]
    assert fake_brevo.calls == []


def test_config_require_raises_when_unconfigured():
    with pytest.raises(ConfigurationError):
        BrevoConfig(api_key="", sender_email="a@b.c", sender_name="X").require()


def test_request_shape_and_single_render(fake_brevo, sleeper, monkeypatch):
    renders = []
    original_render = BulkEmailDispatcher.render

    def counting_render(self, subject, body):
        renders.append(subject)
        return original_render(self, subject, body)

    monkeypatch.setattr(BulkEmailDispatcher, "render", counting_render)
    BulkEmailDispatcher(CONFIG, http=fake_brevo, sleep=sleeper).dispatch(
        _recipients(15), "Weekly digest", "First line\nSecond line"
    )

    assert renders == ["Weekly digest"]
    call = fake_brevo.calls[0]
    assert call["url"] == CONFIG.api_url
    assert call["timeout"] == 5
    assert call["headers"] == {
        "accept": "application/json",
        "api-key": "xkeysib-test",
        "content-type": "application/json",
    }
    assert call["json"]["sender"] == {"name": "CyberPiT Team", "email": "administrator@cyberpit.live"}
    assert call["json"]["subject"] == "Weekly digest"
    assert "First line\nSecond line" in call["json"]["htmlContent"]
    assert len({c["json"]["htmlContent"] for c in fake_brevo.calls}) == 1


def test_body_is_html_escaped(dispatcher):
    html = dispatcher.render("Hi", "<script>alert(1)</script>")
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_malformed_success_payload_is_a_failure(sleeper):
    class NoJson:
        status_code = 201
        reason = "Created"

        def json(self):
            raise ValueError("not json")

    class Http:
        def post(self, url, **kwargs):
            return NoJson()

    outcome = BulkEmailDispatcher(CONFIG, http=Http(), sleep=sleeper).dispatch(["a@example.com"], "S", "B")
    assert outcome.errors == ["Failed to send to a@example.com: Malformed provider response"]


def test_empty_input_is_rejected(dispatcher):
    with pytest.raises(ValueError):
        dispatcher.dispatch([], "S", "B")
    with pytest.raises(ValueError):
        dispatcher.dispatch(["a@example.com"], "", "B")
    with pytest.raises(ValueError):
        dispatcher.dispatch(["a@example.com"], "S", "   ")


def test_recipient_send_error_message():
    err = RecipientSendError("x@example.com", "timeout")
    assert str(err) == "Failed to send to x@example.com: timeout"


def test_dispatch_bulk_email_reads_settings(settings, fake_brevo):
    settings.BREVO_API_KEY = "from-settings"
    result = dispatch_bulk_email(["a@example.com"], "S", "B")
    assert result == {"success": True, "sent": 1, "failed": 0, "errors": []}
    assert fake_brevo.calls[0]["headers"]["api-key"] == "from-settings"


def test_dispatch_bulk_email_without_key(settings, fake_brevo):
    settings.BREVO_API_KEY = ""
    result = dispatch_bulk_email(["a@example.com"], "S", "B")
    assert result["success"] is False
    assert result["errors"] == ["Brevo API key not configured"]
    assert fake_brevo.calls == []
