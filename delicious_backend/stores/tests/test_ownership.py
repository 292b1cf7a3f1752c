# stores/tests/test_ownership.py

from django.test import TestCase
from django.urls import reverse

from stores.models import Store
from stores.services.exceptions import StoreOwnershipError
from stores.services.ownership import confirm_owner
from stores.tests.factories import make_store, make_user


class StoreOwnershipTests(TestCase):
    """
    GUARANTEES:
    - Only the author may edit a store
    - A refused edit changes nothing
    """

    def setUp(self):
        self.owner = make_user()
        self.other = make_user("other@example.com")
        self.store = make_store(self.owner, "Cafe Retro")

    def test_owner_passes(self):
        confirm_owner(self.store, self.owner)

    def test_other_user_refused(self):
        with self.assertRaisesMessage(
            StoreOwnershipError, "You must own a store in order to edit it!"
        ):
            confirm_owner(self.store, self.other)

    def test_edit_page_forbidden_for_non_author(self):
        self.client.force_login(self.other)

        response = self.client.get(reverse("stores:edit", args=[self.store.pk]))

        self.assertEqual(response.status_code, 403)

    def test_update_forbidden_for_non_author(self):
        self.client.force_login(self.other)

        response = self.client.post(
            reverse("stores:update", args=[self.store.pk]),
            {
                "name": "Hijacked",
                "address": "Elsewhere",
                "longitude": "1",
                "latitude": "1",
            },
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(Store.objects.get(pk=self.store.pk).name, "Cafe Retro")

    def test_anonymous_sent_to_login(self):
        response = self.client.get(reverse("stores:edit", args=[self.store.pk]))

        self.assertRedirects(response, reverse("users:login"))
