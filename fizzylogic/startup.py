# fizzylogic/startup.py - Initial setup executed before the site accepts requests
import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.db import transaction

logger = logging.getLogger(__name__)


def ensure_superuser():
    """
    Make sure the configured administrative account exists.

    There is no registration or password reset flow on the site, so the first
    account comes from INITIAL_USER_NAME / INITIAL_USER_EMAIL / INITIAL_USER_PASSWORD.
    Errors are not handled here: a failure stops the process from starting.
    Returns the user that was created, or None when nothing had to be done.
    """
    username = settings.INITIAL_USER_NAME
    email = settings.INITIAL_USER_EMAIL
    password = settings.INITIAL_USER_PASSWORD

    if not username or not password:
        logger.info("No initial user configured, skipping superuser setup")
        return None

    User = get_user_model()

    if User.objects.filter(username=username).exists():
        logger.debug(f"Initial user {username} already exists")
        return None

    user = User(username=username, email=email)
    validate_password(password, user)

    with transaction.atomic():
        user = User.objects.create_superuser(username=username, email=email, password=password)

    logger.info(f"Created initial superuser {username}")
    return user
