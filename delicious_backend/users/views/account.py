# users/views/account.py

from __future__ import annotations

from django.contrib import messages
from django.shortcuts import redirect, render

from users.decorators import login_required
from users.forms import AccountForm


@login_required
def edit_account(request):
    form = AccountForm(request.POST or None, instance=request.user)

    if request.method == "POST" and form.is_valid():
        form.save()
        messages.success(request, "Updated the profile!")
        return redirect("users:account")

    return render(
        request, "users/account.html", {"title": "Edit Your Account", "form": form}
    )
