from .ownership import confirm_owner
from .pagination import StorePage, paginate_stores
from .photos import save_photo
from .slugs import assign_slug, slugify_name
from .store_service import create_store, save_store

__all__ = [
    "assign_slug",
    "slugify_name",
    "paginate_stores",
    "StorePage",
    "confirm_owner",
    "save_photo",
    "save_store",
    "create_store",
]
