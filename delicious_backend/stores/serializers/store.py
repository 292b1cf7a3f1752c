# stores/serializers/store.py

from rest_framework import serializers

from stores.models import Store


class LocationSerializer(serializers.Serializer):
    type = serializers.CharField()
    coordinates = serializers.ListField(child=serializers.FloatField())
    address = serializers.CharField()


class StoreSerializer(serializers.ModelSerializer):
    """
    Full store representation (search results).
    """

    location = LocationSerializer(read_only=True)
    tags = serializers.SlugRelatedField(many=True, read_only=True, slug_field="name")
    score = serializers.IntegerField(read_only=True)

    class Meta:
        model = Store
        fields = [
            "id",
            "name",
            "slug",
            "description",
            "tags",
            "created",
            "location",
            "photo",
            "author",
            "score",
        ]
        read_only_fields = fields


class StoreMapSerializer(serializers.ModelSerializer):
    """
    Reduced projection for the map: slug, name, description, location, photo.
    """

    location = LocationSerializer(read_only=True)

    class Meta:
        model = Store
        fields = [
            "slug",
            "name",
            "description",
            "location",
            "photo",
        ]
        read_only_fields = fields


class StoreSearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default="")


class StoreNearQuerySerializer(serializers.Serializer):
    lng = serializers.FloatField(min_value=-180.0, max_value=180.0)
    lat = serializers.FloatField(min_value=-90.0, max_value=90.0)
