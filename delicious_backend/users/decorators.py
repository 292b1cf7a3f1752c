# users/decorators.py

"""
Login gate for server-rendered pages.

Unlike django.contrib.auth.decorators.login_required this flashes a notice
before redirecting, so the login page can tell the visitor why they landed there.
"""

from __future__ import annotations

from functools import wraps

from django.contrib import messages
from django.shortcuts import redirect


def login_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if request.user.is_authenticated:
            return view_func(request, *args, **kwargs)
        messages.error(request, "Oops you must be logged in to do that!")
        return redirect("users:login")

    return _wrapped
