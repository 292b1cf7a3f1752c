# users/services/password_reset.py

"""
PASSWORD RESET SERVICE

Flow:
1) issue_reset_token(email=...)  -> token stored on the user, valid for
   PASSWORD_RESET_TIMEOUT_SECONDS (1 hour by default), mail sent
2) find_user_for_reset(token)    -> user if token matches and is unexpired
3) reset_password(token, ...)    -> new password set, token + expiry cleared

Token format:
- 20 random bytes, hex-encoded (40 characters).
"""

from __future__ import annotations

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.urls import reverse
from django.utils import timezone

from users.services.exceptions import InvalidResetTokenError, UnknownEmailError
from users.services.mail import send_password_reset

logger = logging.getLogger(__name__)

User = get_user_model()

RESET_TOKEN_BYTES = 20


def build_reset_url(*, host: str, token: str) -> str:
    return f"http://{host}{reverse('users:reset', args=[token])}"


@transaction.atomic
def issue_reset_token(*, email: str, host: str, now=None):
    """
    Set a fresh reset token on the account owning `email` and mail the link.

    Raises UnknownEmailError if no account uses that email.
    """
    now = now or timezone.now()
    email = User.objects.normalize_email(email)

    try:
        user = User.objects.select_for_update().get(email=email)
    except User.DoesNotExist as exc:
        logger.warning("Password reset requested for unknown email")
        raise UnknownEmailError("No account with that email exists.") from exc

    user.reset_password_token = secrets.token_hex(RESET_TOKEN_BYTES)
    user.reset_password_expires = now + timedelta(
        seconds=settings.PASSWORD_RESET_TIMEOUT_SECONDS
    )
    user.save(update_fields=["reset_password_token", "reset_password_expires"])

    reset_url = build_reset_url(host=host, token=user.reset_password_token)
    send_password_reset(user=user, reset_url=reset_url)

    logger.info("Password reset token issued", extra={"user_id": str(user.pk)})
    return user


def find_user_for_reset(token: str, *, now=None):
    user = User.objects.with_valid_reset_token(token, now=now).first()
    if user is None:
        logger.info("Password reset token rejected")
        raise InvalidResetTokenError("Password reset is invalid or has expired")
    return user


@transaction.atomic
def reset_password(*, token: str, password: str, now=None):
    """
    Replace the password of the account holding a valid `token`.

    The token and its expiry are cleared so the link works only once.
    """
    user = find_user_for_reset(token, now=now)

    user.set_password(password)
    user.clear_reset_token()
    user.save(
        update_fields=["password", "reset_password_token", "reset_password_expires"]
    )

    logger.info("Password reset completed", extra={"user_id": str(user.pk)})
    return user
