"""Integration tests for the ``seed_products`` management command."""

from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.models import Product

pytestmark = pytest.mark.integration


def _seed(**options) -> str:
    out = StringIO()
    call_command("seed_products", stdout=out, **options)
    return out.getvalue()


class TestSeedProducts:
    def test_default_seeds_sample_catalog(self):
        output = _seed()
        assert Product.objects.count() == 8
        assert "Seed completed: products=8" in output

    def test_count_option(self):
        _seed(count=3)
        assert list(Product.objects.values_list("name", flat=True)) == [
            "Widget",
            "Gadget",
            "Sprocket",
        ]

    def test_skips_non_empty_catalog(self):
        _seed(count=3)
        output = _seed(count=3)
        assert Product.objects.count() == 3
        assert "use --force" in output

    def test_force_adds_more(self):
        _seed(count=3)
        _seed(count=3, force=True)
        assert Product.objects.count() == 6

    def test_names_are_suffixed_past_the_sample_list(self):
        _seed(count=10)
        names = set(Product.objects.values_list("name", flat=True))
        assert {"Widget 2", "Gadget 2"} <= names

    def test_prices_have_two_decimal_places(self):
        _seed(count=5)
        for product in Product.objects.all():
            assert product.price.as_tuple().exponent == -2
            assert Decimal("1.99") <= product.price <= Decimal("999.99")
