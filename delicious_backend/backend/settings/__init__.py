# backend/settings/__init__.py
"""
Select a concrete module with DJANGO_SETTINGS_MODULE:
- backend.settings.dev   (local development, tests, seed_stores)
- backend.settings.prod  (deployments)
"""
