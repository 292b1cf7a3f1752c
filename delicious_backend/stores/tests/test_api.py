# stores/tests/test_api.py

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from stores.tests.factories import make_store, make_user


class StoreSearchApiTests(TestCase):
    """
    GUARANTEES:
    - Name matches outrank description matches
    - At most 5 results; stores without a match are left out
    - Public endpoint
    """

    def setUp(self):
        self.client = APIClient()
        author = make_user()
        make_store(author, "Coffee Corner", description="Beans and cake")
        make_store(author, "Tea House", description="Also serves coffee")
        make_store(author, "Bread Bar", description="Pizza")

    def test_name_match_ranks_first(self):
        response = self.client.get(reverse("stores-api:search"), {"q": "coffee"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [store["name"] for store in response.data]
        self.assertEqual(names, ["Coffee Corner", "Tea House"])
        self.assertEqual(response.data[0]["score"], 2)
        self.assertEqual(response.data[1]["score"], 1)

    def test_limit_five(self):
        author = make_user("more@example.com")
        for i in range(7):
            make_store(author, f"Waffle Spot {i}")

        response = self.client.get(reverse("stores-api:search"), {"q": "waffle"})

        self.assertEqual(len(response.data), 5)

    def test_blank_query_returns_nothing(self):
        response = self.client.get(reverse("stores-api:search"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, [])


class StoreNearApiTests(TestCase):
    """
    GUARANTEES:
    - Only stores within 10km are returned, nearest first
    - Map projection only (slug, name, description, location, photo)
    - Missing coordinates are a 400
    """

    def setUp(self):
        self.client = APIClient()
        author = make_user()
        make_store(author, "Close", lng=-79.8711, lat=43.2557)
        make_store(author, "Across Town", lng=-79.80, lat=43.25)
        make_store(author, "Toronto", lng=-79.3832, lat=43.6532)

    def test_nearby_only_sorted(self):
        response = self.client.get(
            reverse("stores-api:near"), {"lng": "-79.8711", "lat": "43.2557"}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([s["name"] for s in response.data], ["Close", "Across Town"])

    def test_projection(self):
        response = self.client.get(
            reverse("stores-api:near"), {"lng": "-79.8711", "lat": "43.2557"}
        )

        self.assertEqual(
            set(response.data[0]),
            {"slug", "name", "description", "location", "photo"},
        )
        self.assertEqual(response.data[0]["location"]["type"], "Point")
        self.assertEqual(
            response.data[0]["location"]["coordinates"], [-79.8711, 43.2557]
        )

    def test_missing_coordinates(self):
        response = self.client.get(reverse("stores-api:near"), {"lng": "1"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class StoreHeartApiTests(TestCase):
    """
    GUARANTEES:
    - Toggle adds then removes
    - Authentication required
    - Unknown store is a 404
    """

    def setUp(self):
        self.client = APIClient()
        self.user = make_user()
        self.store = make_store(self.user, "Cafe Retro")

    def test_toggle(self):
        self.client.force_authenticate(self.user)
        url = reverse("stores-api:heart", args=[self.store.pk])

        first = self.client.post(url)
        second = self.client.post(url)

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(first.data["hearts"], [self.store.pk])
        self.assertEqual(second.data["hearts"], [])

    def test_requires_auth(self):
        response = self.client.post(reverse("stores-api:heart", args=[self.store.pk]))

        self.assertIn(
            response.status_code,
            (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN),
        )

    def test_unknown_store(self):
        self.client.force_authenticate(self.user)

        response = self.client.post(
            reverse("stores-api:heart", args=["00000000-0000-0000-0000-000000000000"])
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class HealthCheckTests(TestCase):
    def test_health(self):
        response = APIClient().get("/api/health/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"status": "ok", "db": "ok"})
