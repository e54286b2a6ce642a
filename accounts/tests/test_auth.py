"""
Tests for admin sign-in, token refresh/logout and the dashboard.
"""
import pytest

from contact.models import ContactMessage
from newsletter.models import Subscription


def _login(client, email, password):
    return client.post(
        "/api/admin/only_admin/login/", {"email": email, "password": password}, content_type="application/json"
    )


@pytest.mark.django_db
def test_admin_login_returns_tokens_and_profile(client, admin_user):
    resp = _login(client, "  ADMIN@cyberpit.com ", "pass12345")
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["message"] == "Admin login successful"
    assert data["token"] and data["refresh"]
    assert data["admin"]["email"] == "admin@cyberpit.com"
    assert data["admin"]["name"] == "Site Admin"
    assert data["admin"]["role"] == "super-admin"
    admin_user.refresh_from_db()
    assert admin_user.last_login is not None


@pytest.mark.django_db
def test_staff_login_has_admin_role(client, django_user_model):
    django_user_model.objects.create_user(
        username="mod", email="mod@cyberpit.com", password="pass12345", is_staff=True
    )
    resp = _login(client, "mod@cyberpit.com", "pass12345")
    assert resp.status_code == 200
    assert resp.json()["admin"]["role"] == "admin"


@pytest.mark.django_db
def test_wrong_password_is_rejected(client, admin_user):
    resp = _login(client, "admin@cyberpit.com", "nope")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid admin credentials"


@pytest.mark.django_db
def test_missing_fields(client):
    resp = client.post("/api/admin/only_admin/login/", {}, content_type="application/json")
    assert resp.status_code == 400


@pytest.mark.django_db
def test_inactive_admin_cannot_login(client, admin_user):
    admin_user.is_active = False
    admin_user.save()
    assert _login(client, "admin@cyberpit.com", "pass12345").status_code == 401


@pytest.mark.django_db
def test_non_staff_user_is_forbidden(client, django_user_model):
    django_user_model.objects.create_user(username="reader", email="reader@example.com", password="pass12345")
    resp = _login(client, "reader@example.com", "pass12345")
    assert resp.status_code == 403


@pytest.mark.django_db
def test_refresh_and_logout(client, admin_user):
    refresh = _login(client, "admin@cyberpit.com", "pass12345").json()["refresh"]

    resp = client.post("/api/auth/token/refresh/", {"refresh": refresh}, content_type="application/json")
    assert resp.status_code == 200
    assert "access" in resp.json()

    resp = client.post("/api/auth/logout/", {"refresh": refresh}, content_type="application/json")
    assert resp.status_code == 200

    resp = client.post("/api/auth/token/refresh/", {"refresh": refresh}, content_type="application/json")
    assert resp.status_code == 401


@pytest.mark.django_db
def test_dashboard_counts(admin_client):
    ContactMessage.objects.create(name="a", email="a@example.com", subject="s", message="m")
    ContactMessage.objects.create(name="b", email="b@example.com", subject="s", message="m", status="read")
    Subscription.objects.create(email="x@example.com")
    Subscription.objects.create(email="y@example.com", is_active=False)

    resp = admin_client.get("/api/admin/dashboard/")
    assert resp.status_code == 200
    stats = resp.json()["stats"]
    assert stats["contacts"] == 2
    assert stats["unread_contacts"] == 1
    assert stats["subscriptions"] == 1
    assert stats["videos"] == 0


@pytest.mark.django_db
def test_dashboard_requires_admin(client):
    assert client.get("/api/admin/dashboard/").status_code == 401
