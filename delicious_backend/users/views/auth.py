# users/views/auth.py

"""
SESSION AUTH PAGES

- GET/POST /login/
- GET      /logout/
- GET/POST /register/

Failures redirect back to the login page with a flash notice; registration
errors re-render the form with field messages.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from users.forms import LoginForm, RegisterForm

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
def login_view(request):
    if request.method == "GET":
        return render(request, "users/login.html", {"title": "Login", "form": LoginForm()})

    form = LoginForm(request.POST)
    user = None
    if form.is_valid():
        user = authenticate(
            request,
            email=form.cleaned_data["email"],
            password=form.cleaned_data["password"],
        )

    if user is None:
        logger.info("Failed login attempt")
        messages.error(request, "Failed Login!")
        return redirect("users:login")

    login(request, user)
    messages.success(request, "You are now logged in!")
    return redirect("stores:home")


def logout_view(request):
    logout(request)
    messages.success(request, "You are now logged out!")
    return redirect("stores:home")


@require_http_methods(["GET", "POST"])
def register(request):
    form = RegisterForm(request.POST or None)

    if request.method == "POST" and form.is_valid():
        user = form.save()
        login(request, user, backend="users.auth_backends.EmailBackend")
        logger.info("User registered", extra={"user_id": str(user.pk)})
        messages.success(request, "You are now logged in!")
        return redirect("stores:home")

    if form.errors:
        for errors in form.errors.values():
            for error in errors:
                messages.error(request, error)

    return render(request, "users/register.html", {"title": "Register", "form": form})
