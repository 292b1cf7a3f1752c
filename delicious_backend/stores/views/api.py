# stores/views/api.py

"""
STORE JSON API

- GET  /api/search/?q=<text>             -> top 5 text matches (AllowAny)
- GET  /api/stores/near/?lng=..&lat=..   -> up to 10 stores within 10km (AllowAny)
- POST /api/stores/<uuid>/heart/         -> toggle heart, returns the user

Authentication: session (browser) or JWT bearer (API clients).
"""

from __future__ import annotations

from django.conf import settings
from django.http import Http404
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from stores.models import Store
from stores.serializers import (
    StoreMapSerializer,
    StoreNearQuerySerializer,
    StoreSearchQuerySerializer,
    StoreSerializer,
)
from users.serializers import UserSerializer
from users.services.hearts import toggle_heart


class StoreSearchView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Stores"],
        parameters=[
            OpenApiParameter(
                name="q",
                type=str,
                required=False,
                location=OpenApiParameter.QUERY,
                description="Free text matched against store name and description",
            )
        ],
        responses={200: StoreSerializer(many=True)},
        description="Search stores; best 5 matches by text score",
    )
    def get(self, request):
        query = StoreSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        stores = Store.objects.prefetch_related("tags").search(query.validated_data["q"])
        return Response(StoreSerializer(stores, many=True).data)


class StoreNearView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Stores"],
        parameters=[
            OpenApiParameter(name="lng", type=float, required=True, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="lat", type=float, required=True, location=OpenApiParameter.QUERY),
        ],
        responses={
            200: StoreMapSerializer(many=True),
            400: OpenApiResponse(description="Missing or invalid coordinates"),
        },
        description="Stores within NEAR_MAX_DISTANCE_M meters, nearest first (max 10)",
    )
    def get(self, request):
        query = StoreNearQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        stores = Store.objects.only(
            "id", "slug", "name", "description", "location_type",
            "longitude", "latitude", "address", "photo",
        ).near(
            lng=query.validated_data["lng"],
            lat=query.validated_data["lat"],
            max_distance=settings.NEAR_MAX_DISTANCE_M,
        )
        return Response(StoreMapSerializer(stores, many=True).data)


class StoreHeartView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Hearts"],
        request=None,
        responses={
            200: UserSerializer,
            404: OpenApiResponse(description="Store not found"),
        },
        description="Toggle the store in the current user's hearts",
    )
    def post(self, request, pk):
        try:
            user = toggle_heart(user=request.user, store_id=pk)
        except Store.DoesNotExist as exc:
            raise Http404("Store not found") from exc

        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)
