from .store import (
    LocationSerializer,
    StoreMapSerializer,
    StoreNearQuerySerializer,
    StoreSearchQuerySerializer,
    StoreSerializer,
)

__all__ = [
    "LocationSerializer",
    "StoreSerializer",
    "StoreMapSerializer",
    "StoreSearchQuerySerializer",
    "StoreNearQuerySerializer",
]
