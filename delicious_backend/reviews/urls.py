# reviews/urls.py

from django.urls import path

from reviews.views import add_review

app_name = "reviews"

urlpatterns = [
    path("<uuid:store_pk>/", add_review, name="add"),
]
