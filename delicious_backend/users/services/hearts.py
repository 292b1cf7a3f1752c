# users/services/hearts.py

"""
HEARTS SERVICE

Purpose:
- Toggle a store's membership in a user's hearts set.
- List the stores a user has hearted.

Rules:
- Membership is decided from the set as it was BEFORE the update.
- Present -> removed; absent -> added. The M2M table keeps (user, store) unique.
- No lock is taken: two concurrent toggles of the same pair may both read the
  same membership and apply the same operation.
"""

from __future__ import annotations

import logging

from stores.models import Store

logger = logging.getLogger(__name__)


def toggle_heart(*, user, store_id):
    """
    Flip `store_id` in `user.hearts` and return the refreshed user.

    Raises Store.DoesNotExist when no such store exists.
    """
    store = Store.objects.only("pk").get(pk=store_id)

    already_hearted = user.hearts.filter(pk=store.pk).exists()

    if already_hearted:
        user.hearts.remove(store)
    else:
        user.hearts.add(store)

    logger.info(
        "Heart toggled",
        extra={
            "user_id": str(user.pk),
            "store_id": str(store.pk),
            "hearted": not already_hearted,
        },
    )

    user.refresh_from_db()
    return user


def hearted_stores(user):
    """Stores the user has hearted, newest first."""
    return Store.objects.with_reviews().filter(hearted_by=user).order_by("-created")
