# users/views/password.py

"""
FORGOT / RESET PASSWORD PAGES

- POST     /account/forgot/         -> mail a reset link (1 hour)
- GET/POST /account/reset/<token>/  -> choose a new password

Unknown emails and bad/expired tokens redirect to /login/ with an error flash.
"""

from __future__ import annotations

from django.contrib import messages
from django.contrib.auth import login
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from users.forms import ForgotPasswordForm, ResetPasswordForm
from users.services.exceptions import InvalidResetTokenError, UnknownEmailError
from users.services.password_reset import (
    find_user_for_reset,
    issue_reset_token,
    reset_password,
)


@require_POST
def forgot(request):
    form = ForgotPasswordForm(request.POST)
    if not form.is_valid():
        messages.error(request, "No account with that email exists.")
        return redirect("users:login")

    try:
        issue_reset_token(email=form.cleaned_data["email"], host=request.get_host())
    except UnknownEmailError as exc:
        messages.error(request, str(exc))
        return redirect("users:login")

    messages.success(request, "You have been emailed a password reset link.")
    return redirect("users:login")


@require_http_methods(["GET", "POST"])
def reset(request, token):
    try:
        find_user_for_reset(token)
    except InvalidResetTokenError as exc:
        messages.error(request, str(exc))
        return redirect("users:login")

    if request.method == "GET":
        return render(
            request,
            "users/reset.html",
            {"title": "Reset your Password", "form": ResetPasswordForm()},
        )

    form = ResetPasswordForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Passwords do not match!")
        return redirect("users:reset", token=token)

    try:
        user = reset_password(token=token, password=form.cleaned_data["password"])
    except InvalidResetTokenError as exc:
        messages.error(request, str(exc))
        return redirect("users:login")

    login(request, user, backend="users.auth_backends.EmailBackend")
    messages.success(
        request, "Nice! Your password has been reset! You are now logged in!"
    )
    return redirect("stores:home")
