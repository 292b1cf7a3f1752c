# stores/models/store.py

import math
import uuid
from functools import reduce
from operator import add

from django.conf import settings
from django.db import models
from django.db.models import (
    Avg,
    Case,
    Count,
    ExpressionWrapper,
    F,
    FloatField,
    IntegerField,
    Value,
    When,
)
from django.db.models.functions import ASin, Cos, Power, Radians, Sin, Sqrt
from django.utils import timezone

from .tag import Tag

EARTH_RADIUS_M = 6371000.0
METERS_PER_DEGREE_LAT = 111320.0

TOP_STORES_LIMIT = 10
TOP_STORES_MIN_REVIEWS = 2
SEARCH_LIMIT = 5
SEARCH_MAX_TERMS = 10
NEAR_LIMIT = 10


class StoreQuerySet(models.QuerySet):
    """
    Read-side queries for the store directory.

    Everything here only composes ORM expressions; execution, indexing and
    aggregation are left to the database.
    """

    def with_reviews(self):
        """Author + reviews (with their authors) loaded alongside each store."""
        return self.select_related("author").prefetch_related(
            "tags", "reviews__author"
        )

    def tags_list(self):
        """
        Tag histogram: every tag used by at least one store in this queryset,
        annotated with `count`, most used first. Ties keep database order.
        """
        return (
            Tag.objects.filter(stores__in=self)
            .annotate(count=Count("stores"))
            .order_by("-count")
        )

    def top_stores(self):
        """
        Stores with at least two reviews, ranked by unweighted mean rating.

        Stores with zero or one review are left out entirely.
        """
        return (
            self.annotate(
                review_count=Count("reviews"),
                average_rating=Avg("reviews__rating"),
            )
            .filter(review_count__gte=TOP_STORES_MIN_REVIEWS)
            .order_by("-average_rating")[:TOP_STORES_LIMIT]
        )

    def search(self, query: str):
        """
        Text search over name + description, best matches first.

        `score` counts 2 for each query term found in the name and 1 for each
        found in the description. Stores scoring 0 are excluded.
        """
        terms = list(dict.fromkeys((query or "").split()))[:SEARCH_MAX_TERMS]
        if not terms:
            return self.none()

        weights = []
        for term in terms:
            weights.append(
                Case(When(name__icontains=term, then=Value(2)), default=Value(0))
            )
            weights.append(
                Case(When(description__icontains=term, then=Value(1)), default=Value(0))
            )

        score = ExpressionWrapper(reduce(add, weights), output_field=IntegerField())

        return (
            self.annotate(score=score)
            .filter(score__gt=0)
            .order_by("-score", "-created")[:SEARCH_LIMIT]
        )

    def near(self, *, lng: float, lat: float, max_distance: float):
        """
        Stores within `max_distance` meters of (lng, lat), nearest first.

        A lat/lng bounding box narrows the candidates before the haversine
        distance (meters) is computed in the database as `distance`.
        The box does not wrap around the antimeridian.
        """
        dlat = max_distance / METERS_PER_DEGREE_LAT
        dlng = dlat / max(math.cos(math.radians(lat)), 0.01)

        lat_rad = math.radians(lat)
        half_dlat = Radians(F("latitude") - Value(lat)) / Value(2.0)
        half_dlng = Radians(F("longitude") - Value(lng)) / Value(2.0)

        a = Power(Sin(half_dlat), 2) + Value(math.cos(lat_rad)) * Cos(
            Radians(F("latitude"))
        ) * Power(Sin(half_dlng), 2)

        distance = ExpressionWrapper(
            Value(2.0 * EARTH_RADIUS_M) * ASin(Sqrt(a)),
            output_field=FloatField(),
        )

        return (
            self.filter(
                latitude__gte=lat - dlat,
                latitude__lte=lat + dlat,
                longitude__gte=lng - dlng,
                longitude__lte=lng + dlng,
            )
            .annotate(distance=distance)
            .filter(distance__lte=max_distance)
            .order_by("distance")[:NEAR_LIMIT]
        )


class Store(models.Model):
    """
    A store listing.

    Rules:
    - name is required and stored trimmed
    - slug is derived from name and unique across all stores; it is only
      recomputed when name changes (see stores.services.slugs)
    - location is a GeoJSON-style point: (longitude, latitude) + address
    - author is set on creation and never changes
    """

    LOCATION_POINT = "Point"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=280, unique=True)
    description = models.TextField(blank=True)

    tags = models.ManyToManyField(Tag, blank=True, related_name="stores")

    created = models.DateTimeField(default=timezone.now, db_index=True)

    location_type = models.CharField(max_length=16, default=LOCATION_POINT, editable=False)
    longitude = models.FloatField()
    latitude = models.FloatField()
    address = models.CharField(max_length=255)

    photo = models.CharField(max_length=255, blank=True)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="stores",
    )

    objects = StoreQuerySet.as_manager()

    class Meta:
        ordering = ["-created"]
        indexes = [
            models.Index(fields=["latitude", "longitude"], name="store_lat_lng_idx"),
        ]

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        loaded = dict(zip(field_names, values)).get("name")
        instance._loaded_name = None if loaded is models.DEFERRED else loaded
        return instance

    @property
    def name_changed(self) -> bool:
        """True for unsaved stores and when name differs from the stored one."""
        if self._state.adding:
            return True
        return self.name != getattr(self, "_loaded_name", None)

    def save(self, *args, **kwargs):
        self.name = (self.name or "").strip()
        self.description = (self.description or "").strip()
        super().save(*args, **kwargs)
        self._loaded_name = self.name

    @property
    def location(self) -> dict:
        return {
            "type": self.location_type,
            "coordinates": [self.longitude, self.latitude],
            "address": self.address,
        }

    def is_owned_by(self, user) -> bool:
        return user is not None and self.author_id == getattr(user, "pk", None)

    def __str__(self):
        return self.name
