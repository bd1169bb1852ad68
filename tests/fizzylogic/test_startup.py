"""Tests for the initial superuser setup that runs before the site serves requests."""
import importlib

import pytest
from django.contrib.auth.models import User
from django.core.exceptions import ValidationError
from django.core.management import call_command

from fizzylogic.startup import ensure_superuser


@pytest.fixture
def initial_user(settings):
    settings.INITIAL_USER_NAME = "admin"
    settings.INITIAL_USER_EMAIL = "admin@fizzylogic.example"
    settings.INITIAL_USER_PASSWORD = "correct-horse-battery-staple"
    return settings


@pytest.mark.django_db
def test_creates_superuser_from_settings(initial_user):
    user = ensure_superuser()

    assert user is not None
    stored = User.objects.get(username="admin")
    assert stored.is_superuser
    assert stored.is_staff
    assert stored.email == "admin@fizzylogic.example"
    assert stored.check_password("correct-horse-battery-staple")


@pytest.mark.django_db
def test_existing_user_is_left_alone(initial_user):
    User.objects.create_user(username="admin", password="something-else-entirely")

    assert ensure_superuser() is None
    assert User.objects.filter(username="admin").count() == 1
    assert not User.objects.get(username="admin").is_superuser


@pytest.mark.django_db
def test_nothing_happens_without_configuration(settings):
    settings.INITIAL_USER_NAME = ""
    settings.INITIAL_USER_PASSWORD = ""

    assert ensure_superuser() is None
    assert not User.objects.exists()


@pytest.mark.django_db
def test_weak_password_is_fatal(initial_user):
    initial_user.INITIAL_USER_PASSWORD = "123"

    with pytest.raises(ValidationError):
        ensure_superuser()

    assert not User.objects.exists()


@pytest.mark.django_db
def test_wsgi_application_starts_and_runs_initial_setup(initial_user):
    import fizzylogic.wsgi

    module = importlib.reload(fizzylogic.wsgi)

    assert callable(module.application)
    assert User.objects.filter(username="admin", is_superuser=True).exists()


@pytest.mark.django_db
def test_management_command(initial_user, capsys):
    call_command("ensure_superuser")
    call_command("ensure_superuser")

    output = capsys.readouterr().out
    assert "Created superuser admin" in output
    assert "Nothing to do" in output
    assert User.objects.filter(username="admin").count() == 1
