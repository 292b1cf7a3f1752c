from django.contrib import admin

from reviews.models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("store", "author", "rating", "created")
    list_filter = ("rating",)
    search_fields = ("text", "store__name", "author__email")
    raw_id_fields = ("store", "author")
