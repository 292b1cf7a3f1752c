# users/services/exceptions.py

"""
USER SERVICE ERRORS

Centralized domain errors for account services.
"""


class UserServiceError(Exception):
    """Base exception for all account service failures."""


class UnknownEmailError(UserServiceError):
    """Raised when a forgot-password request names no known account."""


class InvalidResetTokenError(UserServiceError):
    """Raised when a reset token is unknown or has expired."""
