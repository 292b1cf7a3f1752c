# stores/services/pagination.py

"""
STORE LISTING PAGINATION

Rules:
- pages are 1-based; page size comes from STORES_PAGE_SIZE (6)
- skip = page * size - size, newest stores first
- an empty page with skip > 0 is out of range: the caller should redirect to
  the last page, ceil(count / size)
- page 1 with no stores at all is a normal, empty listing
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from django.conf import settings

from stores.models import Store


@dataclass(frozen=True)
class StorePage:
    page: int
    pages: int
    count: int
    stores: list = field(default_factory=list)
    redirect_page: int | None = None

    @property
    def is_out_of_range(self) -> bool:
        return self.redirect_page is not None


def paginate_stores(page: int = 1, *, page_size: int | None = None) -> StorePage:
    size = int(page_size or settings.STORES_PAGE_SIZE)
    page = int(page or 1)
    skip = page * size - size

    count = Store.objects.count()
    pages = math.ceil(count / size)

    # Offsets past the end never reach the database; huge page numbers would
    # overflow its integer OFFSET.
    stores = []
    if skip < count:
        stores = list(Store.objects.with_reviews().order_by("-created")[skip : skip + size])

    redirect_page = None
    if not stores and skip > 0:
        # With no stores at all there is no last page; page 1 is the empty listing.
        redirect_page = max(pages, 1)

    return StorePage(
        page=page,
        pages=pages,
        count=count,
        stores=stores,
        redirect_page=redirect_page,
    )
