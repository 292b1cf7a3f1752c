# users/urls.py

from django.urls import path

from .views import edit_account, forgot, login_view, logout_view, register, reset

app_name = "users"

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("login/", login_view, name="login"),
    path("logout/", logout_view, name="logout"),
    path("register/", register, name="register"),
    path("account/forgot/", forgot, name="forgot"),
    # Mailed links have no trailing slash; the slashed form is accepted too.
    path("account/reset/<str:token>", reset, name="reset"),
    path("account/reset/<str:token>/", reset, name="reset-slash"),
    # ---------------- AUTHENTICATED ----------------
    path("account/", edit_account, name="account"),
]
