from .account import edit_account
from .auth import login_view, logout_view, register
from .password import forgot, reset

__all__ = [
    "login_view",
    "logout_view",
    "register",
    "edit_account",
    "forgot",
    "reset",
]
