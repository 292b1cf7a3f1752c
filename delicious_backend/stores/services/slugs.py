# stores/services/slugs.py

"""
SLUG ASSIGNMENT

Rules:
- slug = slugify(name); names that slugify to nothing fall back to "store"
- if N other stores already have a slug matching ^(base)(-[0-9]*)?$
  (case-insensitive), the slug becomes "{base}-{N + 1}", or the next free
  suffix above it when that one is already held
- only runs when the name changed since the store was loaded (or it is new)

Concurrency:
- Choosing a free suffix is not a reservation. Two stores created with the
  same name at the same moment can compute the same slug; the unique index on
  Store.slug turns that into an IntegrityError instead of a duplicate.
"""

from __future__ import annotations

import logging

from django.utils.text import slugify

from stores.models import Store

logger = logging.getLogger(__name__)

FALLBACK_SLUG = "store"


def slugify_name(name: str) -> str:
    return slugify(name or "") or FALLBACK_SLUG


def assign_slug(store: Store) -> str:
    """
    Set `store.slug` from its name, suffixing to keep it unique.

    Returns the (possibly unchanged) slug. The first candidate is
    "{base}-{N + 1}"; if another store already holds it (a name like
    "Cafe 3" slugifies into the suffixed range) the suffix is bumped
    until a free slug is found.
    """
    if not store.name_changed and store.slug:
        return store.slug

    base = slugify_name(store.name)
    others = Store.objects.exclude(pk=store.pk)

    taken = others.filter(slug__iregex=rf"^({base})(-[0-9]*)?$").count()
    if not taken:
        store.slug = base
        return store.slug

    suffix = taken + 1
    while others.filter(slug__iexact=f"{base}-{suffix}").exists():
        suffix += 1

    store.slug = f"{base}-{suffix}"
    logger.info(
        "Slug collision resolved by suffix",
        extra={"base": base, "slug": store.slug, "matches": taken},
    )
    return store.slug
