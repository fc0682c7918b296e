"""Product repository interface.

Narrows ``IRepository`` to the ``Product`` entity.  ``ProductService``
depends on this contract only, so any store that implements it can back the
API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""
