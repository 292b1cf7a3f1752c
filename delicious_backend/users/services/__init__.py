from .hearts import hearted_stores, toggle_heart
from .password_reset import find_user_for_reset, issue_reset_token, reset_password

__all__ = [
    "toggle_heart",
    "hearted_stores",
    "issue_reset_token",
    "find_user_for_reset",
    "reset_password",
]
