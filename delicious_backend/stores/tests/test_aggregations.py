# stores/tests/test_aggregations.py

from django.test import TestCase

from reviews.models import Review
from stores.models import Store
from stores.tests.factories import make_store, make_user


class TagsListTests(TestCase):
    """
    GUARANTEES:
    - Each used tag appears once with the number of stores carrying it
    - Most used tags come first
    """

    def setUp(self):
        author = make_user()
        make_store(author, "A", tags=["Wifi", "Open Late"])
        make_store(author, "B", tags=["Wifi"])
        make_store(author, "C", tags=["Wifi", "Licensed"])
        make_store(author, "D")

    def test_counts(self):
        counts = {tag.name: tag.count for tag in Store.objects.tags_list()}

        self.assertEqual(counts, {"Wifi": 3, "Open Late": 1, "Licensed": 1})

    def test_most_used_first(self):
        first = Store.objects.tags_list().first()

        self.assertEqual(first.name, "Wifi")


class TopStoresTests(TestCase):
    """
    GUARANTEES:
    - Only stores with two or more reviews are ranked
    - Ranking is by mean rating, best first
    """

    def setUp(self):
        self.author = make_user()
        self.reviewer = make_user("reviewer@example.com")

    def _review(self, store, *ratings):
        for rating in ratings:
            Review.objects.create(
                author=self.reviewer, store=store, text="ok", rating=rating
            )

    def test_ranking(self):
        good = make_store(self.author, "Good")
        great = make_store(self.author, "Great")
        single = make_store(self.author, "Single")
        make_store(self.author, "Unreviewed")

        self._review(good, 4, 3)
        self._review(great, 5, 5, 4)
        self._review(single, 5)

        top = list(Store.objects.top_stores())

        self.assertEqual([s.name for s in top], ["Great", "Good"])
        self.assertEqual(top[0].review_count, 3)
        self.assertAlmostEqual(top[1].average_rating, 3.5)

    def test_top_page_renders(self):
        store = make_store(self.author, "Good")
        self._review(store, 4, 4)

        response = self.client.get("/top/")

        self.assertContains(response, "Good")
