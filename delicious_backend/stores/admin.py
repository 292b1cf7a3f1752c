# stores/admin.py
"""
PATH: stores/admin.py

Admin rules:
- slug is derived from name by the write service and is read-only here
- author is read-only once the store exists
- saves go through save_store() so slug assignment runs like it does on the site
- Store.id is a UUID with a default, so "is this new?" is read from
  obj._state.adding, never from obj.pk
"""

from django.contrib import admin

from stores.models import Store, Tag
from stores.services.store_service import save_store


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ("name",)
    search_fields = ("name",)


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "author", "address", "created")
    list_filter = ("tags",)
    search_fields = ("name", "slug", "description", "address")
    readonly_fields = ("slug", "location_type")
    filter_horizontal = ("tags",)
    raw_id_fields = ("author",)

    def get_readonly_fields(self, request, obj=None):
        # author is fixed once the store exists
        if obj is not None:
            return (*self.readonly_fields, "author")
        return self.readonly_fields

    def save_model(self, request, obj, form, change):
        author = None if change else (obj.author if obj.author_id else request.user)
        save_store(store=obj, author=author)
