"""
PATH: users/auth_backends.py

AUTH BACKEND: case-insensitive email login

Rules:
- The identifier is the email address, matched case-insensitively.
- Django convention passes the identifier as "username"; the login form
  passes email=... explicitly. Either works.
- Inactive users never authenticate.

Used by django.contrib.auth.authenticate() for both the login page and the
JWT obtain endpoint.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend

User = get_user_model()


class EmailBackend(ModelBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        identifier = (kwargs.get("email") or username or "").strip()
        if not identifier or password is None:
            return None

        try:
            user = User.objects.get(email__iexact=identifier)
        except User.DoesNotExist:
            # Run the hasher anyway so timing doesn't reveal unknown emails.
            User().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user

        return None
