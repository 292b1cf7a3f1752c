from .api import StoreHeartView, StoreNearView, StoreSearchView
from .pages import (
    add_store,
    edit_store,
    hearts_page,
    map_page,
    store_detail,
    store_list,
    stores_by_tag,
    top_stores,
    update_store,
)

__all__ = [
    "store_list",
    "add_store",
    "edit_store",
    "update_store",
    "store_detail",
    "stores_by_tag",
    "top_stores",
    "map_page",
    "hearts_page",
    "StoreSearchView",
    "StoreNearView",
    "StoreHeartView",
]
