# productmanager/catalog/products/serializers.py
from rest_framework import serializers

from .filters import API_PAGE_SIZE, ProductFilter
from .models import (
    NAME_MAX_LENGTH,
    NAME_REQUIRED_MESSAGE,
    NAME_TOO_LONG_MESSAGE,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX,
    PRICE_MAX_DIGITS,
    PRICE_MIN,
    PRICE_RANGE_MESSAGE,
    PRICE_REQUIRED_MESSAGE,
    Product,
)


# ---------------------------------------------------------
# Transfer shapes (output)
# ---------------------------------------------------------
class ProductShortSerializer(serializers.ModelSerializer):
    """Product row in a listing, without the description."""

    isActive = serializers.BooleanField(source="is_active")

    class Meta:
        model = Product
        fields = ("id", "name", "price", "isActive")
        read_only_fields = fields


class ProductFullSerializer(serializers.ModelSerializer):
    isActive = serializers.BooleanField(source="is_active")

    class Meta:
        model = Product
        fields = ("id", "name", "description", "price", "isActive")
        read_only_fields = fields


class ProductListSerializer(serializers.Serializer):
    products = serializers.ListField(child=serializers.DictField())
    totalCount = serializers.IntegerField()


# ---------------------------------------------------------
# Create / update payloads (input)
# ---------------------------------------------------------
class ProductWriteSerializer(serializers.Serializer):
    """
    Payload for creating and updating a product.

    Only validates; the entity is built by the service from ``validated_data``.
    """

    name = serializers.CharField(
        max_length=NAME_MAX_LENGTH,
        trim_whitespace=False,
        error_messages={
            "required": NAME_REQUIRED_MESSAGE,
            "blank": NAME_REQUIRED_MESSAGE,
            "null": NAME_REQUIRED_MESSAGE,
            "max_length": NAME_TOO_LONG_MESSAGE,
        },
    )
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, default=None, trim_whitespace=False,
    )
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        min_value=PRICE_MIN,
        max_value=PRICE_MAX,
        error_messages={
            "required": PRICE_REQUIRED_MESSAGE,
            "null": PRICE_REQUIRED_MESSAGE,
            "min_value": PRICE_RANGE_MESSAGE,
            "max_value": PRICE_RANGE_MESSAGE,
            "max_digits": PRICE_RANGE_MESSAGE,
            "max_whole_digits": PRICE_RANGE_MESSAGE,
        },
    )
    isActive = serializers.BooleanField(source="is_active", required=False, default=False)

    def validate_name(self, value):
        # Names are stored as given; whitespace-only counts as missing
        if not value.strip():
            raise serializers.ValidationError(NAME_REQUIRED_MESSAGE)
        return value


class ProductStatusSerializer(serializers.Serializer):
    isActive = serializers.BooleanField(
        source="is_active",
        error_messages={"required": "IsActive is required"},
    )


# ---------------------------------------------------------
# Listing query string
# ---------------------------------------------------------
class ProductListQuerySerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    minPrice = serializers.DecimalField(
        source="min_price", max_digits=PRICE_MAX_DIGITS + 2, decimal_places=PRICE_DECIMAL_PLACES + 2,
        required=False, allow_null=True,
    )
    maxPrice = serializers.DecimalField(
        source="max_price", max_digits=PRICE_MAX_DIGITS + 2, decimal_places=PRICE_DECIMAL_PLACES + 2,
        required=False, allow_null=True,
    )
    isActive = serializers.BooleanField(source="is_active", required=False, allow_null=True, default=None)
    sortBy = serializers.CharField(source="sort_by", required=False, allow_blank=True)
    ascending = serializers.BooleanField(required=False, default=True)
    page = serializers.IntegerField(required=False, default=1)
    pageSize = serializers.IntegerField(source="page_size", required=False, allow_null=True, default=None)

    def to_filter(self, default_page_size=API_PAGE_SIZE) -> ProductFilter:
        return ProductFilter(default_page_size=default_page_size, **self.validated_data)
