# users/tests/test_hearts.py

import uuid

from django.test import TestCase

from stores.models import Store
from stores.tests.factories import make_store, make_user
from users.services.hearts import hearted_stores, toggle_heart


class HeartToggleTests(TestCase):
    """
    GUARANTEES:
    - Toggle adds an absent store and removes a present one
    - Toggling twice restores the original set
    - Unknown stores raise Store.DoesNotExist
    """

    def setUp(self):
        self.user = make_user()
        self.store = make_store(self.user, "Cafe Retro")
        self.kept = make_store(self.user, "Bread Bar")
        self.user.hearts.add(self.kept)

    def _hearts(self):
        return set(self.user.hearts.values_list("pk", flat=True))

    def test_toggle_adds(self):
        toggle_heart(user=self.user, store_id=self.store.pk)

        self.assertEqual(self._hearts(), {self.store.pk, self.kept.pk})

    def test_toggle_removes(self):
        toggle_heart(user=self.user, store_id=self.kept.pk)

        self.assertEqual(self._hearts(), set())

    def test_toggle_twice_restores(self):
        before = self._hearts()

        toggle_heart(user=self.user, store_id=self.store.pk)
        toggle_heart(user=self.user, store_id=self.store.pk)

        self.assertEqual(self._hearts(), before)

    def test_unknown_store(self):
        with self.assertRaises(Store.DoesNotExist):
            toggle_heart(user=self.user, store_id=uuid.uuid4())

    def test_hearted_stores(self):
        self.assertEqual(list(hearted_stores(self.user)), [self.kept])
