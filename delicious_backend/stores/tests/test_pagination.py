# stores/tests/test_pagination.py

from django.test import TestCase, override_settings
from django.urls import reverse

from stores.services.pagination import paginate_stores
from stores.tests.factories import make_store, make_user


@override_settings(STORES_PAGE_SIZE=6)
class StorePaginationTests(TestCase):
    """
    Listing pagination.

    GUARANTEES:
    - 6 stores per page, newest first
    - Out of range pages point at the last page
    - An empty directory is a normal empty page 1
    """

    def setUp(self):
        self.author = make_user()

    def _seed(self, n):
        return [make_store(self.author, f"Store {i}") for i in range(n)]

    def test_first_page(self):
        self._seed(8)

        listing = paginate_stores(1)

        self.assertEqual(len(listing.stores), 6)
        self.assertEqual(listing.pages, 2)
        self.assertEqual(listing.count, 8)
        self.assertFalse(listing.is_out_of_range)

    def test_last_page_holds_the_remainder(self):
        self._seed(8)

        listing = paginate_stores(2)

        self.assertEqual(len(listing.stores), 2)

    def test_out_of_range_page_redirects_to_last(self):
        self._seed(8)

        listing = paginate_stores(5)

        self.assertTrue(listing.is_out_of_range)
        self.assertEqual(listing.redirect_page, 2)

    def test_empty_directory_page_one(self):
        listing = paginate_stores(1)

        self.assertFalse(listing.is_out_of_range)
        self.assertEqual(listing.stores, [])
        self.assertEqual(listing.pages, 0)

    def test_empty_directory_later_page_goes_to_page_one(self):
        listing = paginate_stores(3)

        self.assertEqual(listing.redirect_page, 1)

    def test_view_redirects_with_flash(self):
        self._seed(7)

        response = self.client.get(reverse("stores:page", args=[9]), follow=True)

        self.assertRedirects(response, reverse("stores:page", args=[2]))
        flashes = [str(m) for m in response.context["messages"]]
        self.assertIn(
            "You asked for page 9 but that doesn't exist. I put you on page 2.",
            flashes,
        )

    def test_page_zero_is_not_routed(self):
        response = self.client.get("/stores/page/0/")

        self.assertEqual(response.status_code, 404)

    def test_huge_page_number_redirects_to_last(self):
        self._seed(7)

        response = self.client.get("/stores/page/99999999999999999999/")

        self.assertRedirects(
            response,
            reverse("stores:page", args=[2]),
            fetch_redirect_response=False,
        )

    def test_huge_page_number_in_service(self):
        self._seed(3)

        listing = paginate_stores(10**20)

        self.assertEqual(listing.stores, [])
        self.assertEqual(listing.redirect_page, 1)
