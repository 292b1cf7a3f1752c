"""
PATH: users/models/user.py

CUSTOM USER MODEL

Identity:
- Email is the login identifier (unique, stored lower-cased).
- Password hashing + session handling are delegated to django.contrib.auth.

Hearts:
- `hearts` is the set of stores a user has favorited.
- Backed by an auto-created M2M table, so a (user, store) pair can appear
  at most once.

Password reset:
- reset_password_token / reset_password_expires are transient.
- Both are set by a forgot-password request and cleared on a successful reset.
"""

from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def normalize_email(self, email):
        return (email or "").strip().lower()

    def create_user(self, email=None, password=None, **extra_fields):
        email = self.normalize_email(email)
        if not email:
            raise ValueError("An email address is required")

        extra_fields.setdefault("is_active", True)

        user = self.model(email=email, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.full_clean(exclude=["password"])
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Superuser must have an email")
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email=email, password=password, **extra_fields)

    def with_valid_reset_token(self, token: str, *, now=None):
        """Users whose reset token matches and has not yet expired."""
        now = now or timezone.now()
        token = (token or "").strip()
        if not token:
            return self.none()
        return self.filter(
            reset_password_token=token,
            reset_password_expires__gt=now,
        )


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255, blank=True)

    hearts = models.ManyToManyField(
        "stores.Store",
        blank=True,
        related_name="hearted_by",
    )

    reset_password_token = models.CharField(
        max_length=64, null=True, blank=True, db_index=True
    )
    reset_password_expires = models.DateTimeField(null=True, blank=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        self.email = self.__class__.objects.normalize_email(self.email)
        self.name = (self.name or "").strip()

    def get_full_name(self):
        return self.name or self.email

    def get_short_name(self):
        return self.name or self.email.split("@")[0]

    def clear_reset_token(self):
        self.reset_password_token = None
        self.reset_password_expires = None

    def __str__(self):
        return self.name or self.email
