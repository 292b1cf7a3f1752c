# stores/services/exceptions.py

"""
STORE SERVICE ERRORS

Centralized domain errors for store services.
"""

from django.core.exceptions import PermissionDenied


class StoreServiceError(Exception):
    """Base exception for store service failures."""


class StoreOwnershipError(PermissionDenied):
    """
    Raised when someone other than the author tries to edit a store.

    Subclasses PermissionDenied so an uncaught instance becomes a 403.
    """


class PhotoTypeError(StoreServiceError):
    """Raised when an uploaded file is not an image."""
