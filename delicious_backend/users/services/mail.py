# users/services/mail.py

"""
Outbound account mail.

HTML is rendered from templates/email/, the plain-text part is derived from it.
Delivery is whatever EMAIL_BACKEND is configured (EMAIL_URL).
"""

from __future__ import annotations

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import strip_tags


def send(*, user, subject: str, template: str, context: dict | None = None) -> int:
    context = {"user": user, **(context or {})}
    html = render_to_string(f"email/{template}.html", context)
    text = strip_tags(html).strip()

    message = EmailMultiAlternatives(
        subject=subject,
        body=text,
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[user.email],
    )
    message.attach_alternative(html, "text/html")
    return message.send()


def send_password_reset(*, user, reset_url: str) -> int:
    return send(
        user=user,
        subject="Password Reset",
        template="password-reset",
        context={"reset_url": reset_url},
    )
