"""Product model.

Rules:
- ``name`` is required, non-blank and at most 255 characters.
- ``price`` is a required decimal (10 digits, 2 decimal places).  Its sign
  is not constrained.
- ``description`` is optional and nullable.
- ``id`` and the timestamps come from ``BaseModel``; rows are ordered by
  insertion.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import BaseModel
from modules.products.constants import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)


class Product(BaseModel):
    """The single catalog entity."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01

    class Meta:
        db_table = "products"
        ordering = ["created_at", "id"]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name is not None:
            self.name = self.name.strip()
        if not self.name:
            raise ValidationError({"name": "Name must not be empty."})

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
