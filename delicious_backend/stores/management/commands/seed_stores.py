import random

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from reviews.models import Review
from stores.models import Store
from stores.services.store_service import create_store

User = get_user_model()


class Command(BaseCommand):
    help = "Seed demo users, stores and reviews (safe to run more than once)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            default="wes",
            help="Password given to the demo users created by this command",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding stores and reviews..."))

        # -------------------------------
        # USERS
        # -------------------------------
        users_data = [
            ("wes@example.com", "Wes Bos"),
            ("debbie@example.com", "Debbie Downer"),
            ("beau@example.com", "Beau"),
        ]

        user_objs = []
        for email, name in users_data:
            user = User.objects.filter(email=email).first()
            if user is None:
                user = User.objects.create_user(
                    email=email, password=options["password"], name=name
                )
            user_objs.append(user)

        # -------------------------------
        # STORES
        # -------------------------------
        stores_data = [
            (
                "Cafe Retro",
                "Coffee and waffles in a 70s diner",
                "Hamilton, ON, Canada",
                -79.8711, 43.2557,
                ["Wifi", "Open Late"],
            ),
            (
                "Mulberry Coffee",
                "Roasted in house, served in a converted church",
                "193 James St N, Hamilton, ON",
                -79.8662, 43.2659,
                ["Wifi", "Licensed"],
            ),
            (
                "Bread Bar",
                "Wood fired pizza and craft beer",
                "258 Locke St S, Hamilton, ON",
                -79.8856, 43.2535,
                ["Family Friendly", "Licensed"],
            ),
            (
                "Saint James",
                "Espresso bar with a small brunch menu",
                "170 James St S, Hamilton, ON",
                -79.8699, 43.2521,
                ["Wifi", "Vegetarian"],
            ),
        ]

        store_objs = []
        for index, (name, description, address, lng, lat, tags) in enumerate(stores_data):
            store = Store.objects.filter(name=name).first()
            if store is None:
                store = create_store(
                    author=user_objs[index % len(user_objs)],
                    tag_names=tags,
                    name=name,
                    description=description,
                    address=address,
                    longitude=lng,
                    latitude=lat,
                )
            store_objs.append(store)

        # -------------------------------
        # REVIEWS
        # -------------------------------
        for store in store_objs:
            if store.reviews.exists():
                continue
            for author in user_objs:
                if author.pk == store.author_id:
                    continue
                Review.objects.create(
                    author=author,
                    store=store,
                    text=f"Had a great time at {store.name}.",
                    rating=random.randint(Review.RATING_MIN, Review.RATING_MAX),
                )

        self.stdout.write(
            self.style.SUCCESS("✅ Stores and reviews seeded successfully.")
        )
