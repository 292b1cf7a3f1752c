# reviews/tests/test_reviews.py

from django.db import IntegrityError
from django.test import TestCase
from django.urls import reverse

from reviews.models import Review
from stores.tests.factories import make_store, make_user


class ReviewModelTests(TestCase):
    """
    GUARANTEES:
    - Ratings outside 1..5 are rejected by the database
    """

    def setUp(self):
        self.user = make_user()
        self.store = make_store(self.user)

    def test_rating_bounds_enforced(self):
        with self.assertRaises(IntegrityError):
            Review.objects.create(author=self.user, store=self.store, text="meh", rating=6)


class AddReviewViewTests(TestCase):
    """
    GUARANTEES:
    - Logged in users can review; author and store are recorded
    - Invalid reviews are not saved
    - Anonymous visitors are sent to login
    """

    def setUp(self):
        self.owner = make_user()
        self.reviewer = make_user("reviewer@example.com")
        self.store = make_store(self.owner)
        self.url = reverse("reviews:add", args=[self.store.pk])

    def test_add_review(self):
        self.client.force_login(self.reviewer)

        response = self.client.post(self.url, {"text": "Great waffles", "rating": "5"}, follow=True)

        self.assertRedirects(response, reverse("stores:detail", args=[self.store.slug]))
        review = Review.objects.get()
        self.assertEqual(review.author, self.reviewer)
        self.assertEqual(review.store, self.store)
        self.assertEqual(review.rating, 5)
        self.assertIn("Review Saved!", [str(m) for m in response.context["messages"]])
        self.assertContains(response, "Great waffles")

    def test_invalid_rating(self):
        self.client.force_login(self.reviewer)

        self.client.post(self.url, {"text": "Bad", "rating": "9"})

        self.assertFalse(Review.objects.exists())

    def test_requires_login(self):
        response = self.client.post(self.url, {"text": "x", "rating": "3"})

        self.assertRedirects(response, reverse("users:login"))
        self.assertFalse(Review.objects.exists())
