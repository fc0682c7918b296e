"""Product DRF serializers.

``ProductSerializer`` renders the resource.  Input is validated by the
pydantic DTOs in ``dtos.py``; the remaining serializers only describe
request and response bodies for the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.constants import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)
from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "description",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


# ---------------------------------------------------------------------------
# Schema-only serializers
# ---------------------------------------------------------------------------


class ProductCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH)
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    description = serializers.CharField(required=False, allow_null=True)


class ProductUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=NAME_MAX_LENGTH, required=False)
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        required=False,
    )
    description = serializers.CharField(required=False, allow_null=True)


class ProductUpdateResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    product = ProductSerializer()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
    errors = serializers.DictField(
        child=serializers.ListField(child=serializers.CharField()),
        required=False,
    )
    message = serializers.CharField(required=False)
