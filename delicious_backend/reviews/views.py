# reviews/views.py

"""
REVIEW SUBMISSION

POST /reviews/<store_pk>/ (login required)
- valid   -> review saved, "Review Saved!" flash
- invalid -> nothing saved, error flash
Either way the visitor lands back on the store page.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect
from django.views.decorators.http import require_POST

from reviews.forms import ReviewForm
from stores.models import Store
from users.decorators import login_required

logger = logging.getLogger(__name__)


@login_required
@require_POST
def add_review(request, store_pk):
    store = get_object_or_404(Store, pk=store_pk)

    form = ReviewForm(request.POST)
    if not form.is_valid():
        for errors in form.errors.values():
            for error in errors:
                messages.error(request, error)
        return redirect("stores:detail", slug=store.slug)

    review = form.save(commit=False)
    review.author = request.user
    review.store = store
    review.save()

    logger.info(
        "Review saved",
        extra={"store_id": str(store.pk), "rating": review.rating},
    )
    messages.success(request, "Review Saved!")
    return redirect("stores:detail", slug=store.slug)
