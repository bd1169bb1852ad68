"""Tests for signing in and out."""
import pytest
from django.urls import reverse

pytestmark = pytest.mark.django_db

LOGIN_URL = reverse("user:login")


def test_login_page_renders(client):
    response = client.get(LOGIN_URL)

    assert response.status_code == 200
    assert 'name="username"' in response.content.decode()


def test_login_redirects_to_dashboard(client, author):
    response = client.post(LOGIN_URL, {"username": "willem", "password": "Secret123!"})

    assert response.status_code == 302
    assert response["Location"] == reverse("content:manage")
    assert client.session["_auth_user_id"] == str(author.pk)


def test_session_ends_with_browser_unless_remembered(client, author):
    client.post(LOGIN_URL, {"username": "willem", "password": "Secret123!"})
    assert client.session.get_expire_at_browser_close()

    client.logout()
    client.post(LOGIN_URL, {"username": "willem", "password": "Secret123!", "remember_me": "on"})
    assert not client.session.get_expire_at_browser_close()


def test_login_follows_safe_next(client, author):
    response = client.post(
        f"{LOGIN_URL}?next=/manage/categories/",
        {"username": "willem", "password": "Secret123!", "next": "/manage/categories/"},
    )

    assert response["Location"] == "/manage/categories/"


def test_login_ignores_external_next(client, author):
    response = client.post(LOGIN_URL, {
        "username": "willem",
        "password": "Secret123!",
        "next": "https://evil.example/phish",
    })

    assert response["Location"] == reverse("content:manage")


def test_wrong_password(client, author):
    response = client.post(LOGIN_URL, {"username": "willem", "password": "nope"})

    assert response.status_code == 200
    assert "_auth_user_id" not in client.session
    assert "Invalid username or password" in response.content.decode()


def test_signed_in_user_skips_login_page(author_client):
    response = author_client.get(LOGIN_URL)

    assert response.status_code == 302


def test_logout_requires_post(author_client):
    assert author_client.get(reverse("user:logout")).status_code == 405

    response = author_client.post(reverse("user:logout"))

    assert response.status_code == 302
    assert response["Location"] == reverse("content:index")
    assert "_auth_user_id" not in author_client.session
