"""Unit tests for ProductDjangoRepository.

Covers:
- get_by_id with existing, missing and malformed IDs.
- list in insertion order.
- save, including partial saves with ``update_fields``.
- hard delete.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories import IProductRepository, ProductDjangoRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "price": Decimal("9.99"),
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(str(product.id))
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id("00000000-0000-0000-0000-000000000000") is None

    def test_returns_none_for_invalid_uuid(self, repo):
        assert repo.get_by_id("not-a-uuid") is None

    def test_returns_none_for_integer_like_id(self, repo):
        assert repo.get_by_id("999") is None


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_returns_empty_list_when_no_products(self, repo):
        assert repo.list() == []

    def test_returns_products_in_insertion_order(self, repo):
        for name in ("Zeta", "Alpha", "Mid"):
            _make_product(name=name)

        names = [product.name for product in repo.list()]

        assert names == ["Zeta", "Alpha", "Mid"]


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_creates_new_product(self, repo):
        product = repo.save(Product(name="Gadget", price=Decimal("29.99")))

        stored = Product.objects.get(id=product.id)
        assert stored.name == "Gadget"
        assert stored.price == Decimal("29.99")

    def test_update_fields_only_writes_given_columns(self, repo):
        product = _make_product(description="Kept")
        Product.objects.filter(id=product.id).update(name="Changed elsewhere")

        product.price = Decimal("12.50")
        repo.save(product, update_fields=["price"])

        stored = Product.objects.get(id=product.id)
        assert stored.price == Decimal("12.50")
        assert stored.name == "Changed elsewhere"
        assert stored.description == "Kept"

    def test_update_fields_refreshes_updated_at(self, repo):
        product = _make_product()
        old = timezone.now() - timedelta(days=1)
        Product.objects.filter(id=product.id).update(updated_at=old)

        product.name = "Renamed"
        repo.save(product, update_fields=["name"])

        stored = Product.objects.get(id=product.id)
        assert stored.updated_at > old


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_removes_row(self, repo):
        product = _make_product()

        assert repo.delete(str(product.id)) is True
        assert not Product.objects.filter(id=product.id).exists()

    def test_second_delete_returns_false(self, repo):
        product = _make_product()
        repo.delete(str(product.id))

        assert repo.delete(str(product.id)) is False

    def test_missing_id_returns_false(self, repo):
        assert repo.delete("00000000-0000-0000-0000-000000000000") is False

    def test_invalid_uuid_returns_false(self, repo):
        assert repo.delete("not-a-uuid") is False
