# stores/services/ownership.py

from __future__ import annotations

import logging

from stores.services.exceptions import StoreOwnershipError

logger = logging.getLogger(__name__)


def confirm_owner(store, user) -> None:
    """Silent for the store's author; raises StoreOwnershipError for anyone else."""
    if store.is_owned_by(user):
        return

    logger.warning(
        "Store edit refused: not the author",
        extra={"store_id": str(store.pk), "user_id": str(getattr(user, "pk", None))},
    )
    raise StoreOwnershipError("You must own a store in order to edit it!")
