# stores/services/store_service.py

"""
STORE WRITE SERVICE

Purpose:
- Single entry point for creating and updating stores.
- Runs slug assignment explicitly (no save signal / generic pre-save hook).
- Resolves free-text tag names into Tag rows.

Rules:
- author is set only when the store is created
- slug is recomputed only when the name changed
- tags are replaced as a set when tag_names is given, untouched when None
"""

from __future__ import annotations

import logging

from django.db import transaction

from stores.models import Store, Tag
from stores.services.slugs import assign_slug

logger = logging.getLogger(__name__)


def parse_tag_names(raw) -> list[str]:
    """
    "Wifi, Open Late,wifi" -> ["Wifi", "Open Late", "wifi"]

    Accepts a comma separated string or an iterable of names. Blank entries
    are dropped and exact duplicates collapse.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    names = [str(name).strip() for name in raw]
    return list(dict.fromkeys(name for name in names if name))


def resolve_tags(names) -> list[Tag]:
    tags = []
    for name in parse_tag_names(names):
        tag, _ = Tag.objects.get_or_create(name=name)
        tags.append(tag)
    return tags


@transaction.atomic
def save_store(*, store: Store, author=None, tag_names=None) -> Store:
    creating = store._state.adding

    if creating:
        if author is None:
            raise ValueError("A new store needs an author")
        store.author = author

    store.name = (store.name or "").strip()
    assign_slug(store)
    store.save()

    if tag_names is not None:
        store.tags.set(resolve_tags(tag_names))

    logger.info(
        "Store created" if creating else "Store updated",
        extra={
            "store_id": str(store.pk),
            "slug": store.slug,
            "author_id": str(store.author_id),
        },
    )
    return store


def create_store(*, author, tag_names=None, **fields) -> Store:
    return save_store(store=Store(**fields), author=author, tag_names=tag_names)
