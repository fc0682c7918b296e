"""Product service layer (Use Cases).

Orchestrates the five catalog operations, delegating persistence to the
injected ``IProductRepository``.

- Missing products raise ``ProductNotFound``.
- Database failures during writes are logged and re-raised as
  ``ProductPersistenceError`` so the API can answer with a structured 500.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import DatabaseError, transaction

from modules.products.exceptions import ProductNotFound, ProductPersistenceError
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Persist a new product from validated input.

        Raises:
            ProductPersistenceError: if the data store rejects the write.
        """
        product = Product(
            name=dto.name,
            price=dto.price,
            description=dto.description,
        )
        try:
            product = self._repo.save(product)
        except DatabaseError as exc:
            logger.exception("product.create_failed", name=dto.name)
            raise ProductPersistenceError(str(exc)) from exc

        logger.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an existing product.

        Fields absent from ``dto`` keep their stored values.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductPersistenceError: if the data store rejects the write.
        """
        product = self._get_or_raise(id)
        log = logger.bind(product_id=str(id))

        changes = dto.changes()
        for field, value in changes.items():
            setattr(product, field, value)

        try:
            product = self._repo.save(product, update_fields=list(changes))
        except DatabaseError as exc:
            log.exception("product.update_failed", fields=sorted(changes))
            raise ProductPersistenceError(str(exc)) from exc

        log.info("product.updated", fields=sorted(changes))
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Permanently remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductPersistenceError: if the data store rejects the delete.
        """
        self._get_or_raise(id)

        try:
            deleted = self._repo.delete(id)
        except DatabaseError as exc:
            logger.exception("product.delete_failed", product_id=str(id))
            raise ProductPersistenceError(str(exc)) from exc

        # removed by a concurrent request between the look-up and the delete
        if not deleted:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product in insertion order."""
        return self._repo.list()

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=str(id))
        return product

    def _get_or_raise(self, id: str) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product
