"""Product domain exceptions.

Raised by the Service Layer.  The API layer (Views) catches these and
translates them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist (or was already deleted)."""


class ProductPersistenceError(Exception):
    """The data store failed while writing a product.

    The message carries the underlying database error so the API can report
    it; the original exception is chained as ``__cause__``.
    """
