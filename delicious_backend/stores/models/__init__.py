"""
PATH: stores/models/__init__.py

Stores models export surface.
"""

from .store import Store, StoreQuerySet
from .tag import Tag

__all__ = [
    "Store",
    "StoreQuerySet",
    "Tag",
]
