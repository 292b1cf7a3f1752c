# stores/apps.py

"""
STORES APP CONFIG

Store directory module:
- Store listings (create/edit with photo + location)
- Tags, search, map lookup
- Top-rated ranking
"""

from django.apps import AppConfig


class StoresConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "stores"
    verbose_name = "Store Directory"
