"""
Common test fixtures for the CyberPiT API tests.

Provides an admin account, a Django test client authenticated through the
admin login endpoint, and ``fake_brevo``, an in-process stand-in for the
Brevo transactional e-mail API.
"""
import pytest
from django.contrib.auth import get_user_model

User = get_user_model()

ADMIN_EMAIL = "admin@cyberpit.com"
ADMIN_PASSWORD = "pass12345"


class FakeResponse:
    def __init__(self, status_code=201, payload=None, reason=""):
        self.status_code = status_code
        self._payload = payload
        self.reason = reason

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeBrevo:
    """Records every POST; addresses in ``fail_for`` get a 400 from the provider."""

    def __init__(self):
        self.calls = []
        self.fail_for = set()

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        recipient = json["to"][0]["email"]
        if recipient in self.fail_for:
            return FakeResponse(400, {"code": "invalid_parameter", "message": "Invalid email address"})
        return FakeResponse(201, {"messageId": f"<{len(self.calls)}@smtp-relay.brevo.com>"})

    @property
    def recipients(self):
        return [call["json"]["to"][0]["email"] for call in self.calls]


@pytest.fixture
def fake_brevo(monkeypatch):
    """Route the dispatcher's default HTTP client to a FakeBrevo."""
    fake = FakeBrevo()
    monkeypatch.setattr("newsletter.services.requests.post", fake.post)
    return fake


@pytest.fixture
def admin_user(db):
    """Create a superuser who can sign in to the admin API."""
    return User.objects.create_superuser(
        username="admin", email=ADMIN_EMAIL, password=ADMIN_PASSWORD, first_name="Site", last_name="Admin"
    )


@pytest.fixture
def admin_client(client, admin_user):
    """Authenticate the Django test client using the admin login endpoint."""
    resp = client.post(
        "/api/admin/only_admin/login/",
        {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        content_type="application/json",
    )
    assert resp.status_code == 200
    token = resp.json()["token"]
    client.defaults["HTTP_AUTHORIZATION"] = f"Bearer {token}"
    return client
