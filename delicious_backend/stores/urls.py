# stores/urls.py

"""
STORES URLS

Pages live at the site root; JSON endpoints are collected in api_urlpatterns
and mounted under /api/ by backend.urls.
"""

from django.urls import path, register_converter

from stores.converters import PositiveIntConverter
from stores.views import (
    StoreHeartView,
    StoreNearView,
    StoreSearchView,
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

register_converter(PositiveIntConverter, "page")

app_name = "stores"

urlpatterns = [
    path("", store_list, name="home"),
    path("stores/", store_list, name="list"),
    path("stores/page/<page:page>/", store_list, name="page"),
    path("add/", add_store, name="add"),
    path("add/<uuid:pk>/", update_store, name="update"),
    path("stores/<uuid:pk>/edit/", edit_store, name="edit"),
    path("store/<slug:slug>/", store_detail, name="detail"),
    path("tags/", stores_by_tag, name="tags"),
    path("tags/<str:tag>/", stores_by_tag, name="tag"),
    path("top/", top_stores, name="top"),
    path("map/", map_page, name="map"),
    path("hearts/", hearts_page, name="hearts"),
]

api_urlpatterns = [
    path("search/", StoreSearchView.as_view(), name="search"),
    path("stores/near/", StoreNearView.as_view(), name="near"),
    path("stores/<uuid:pk>/heart/", StoreHeartView.as_view(), name="heart"),
]
