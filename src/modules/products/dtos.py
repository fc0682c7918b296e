"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  They are the
contract between the API layer and ``ProductService`` and are immutable
(``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, Any, Dict, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from modules.products.constants import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)

_CENT = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
_INTEGER_DIGITS = PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES


def _round_price(value: Decimal) -> Decimal:
    """Round to cents, then check the result fits the price column."""
    if value.adjusted() < _INTEGER_DIGITS:
        value = value.quantize(_CENT, rounding=ROUND_HALF_UP)
    if value.adjusted() >= _INTEGER_DIGITS:
        raise ValueError(
            f"Price must have at most {_INTEGER_DIGITS} digits before the decimal point."
        )
    return value


ProductName = Annotated[str, Field(max_length=NAME_MAX_LENGTH)]
Price = Annotated[Decimal, AfterValidator(_round_price)]


def _coerce_price(value: Any) -> Any:
    # bool is an int subclass and would otherwise coerce to 0/1
    if isinstance(value, bool):
        raise ValueError("Price must be a number.")
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def _require_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Name must not be empty.")
    return value


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-blank string of at most 255 characters.
    - ``price`` is numeric (numeric strings are accepted).  It is rounded
      half-up to cents and must have at most 8 integer digits.
    - ``description`` is a string or ``None``.
    """

    model_config = ConfigDict(frozen=True)

    name: ProductName
    price: Price
    description: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_numeric(cls, v: Any) -> Any:
        return _coerce_price(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return _require_name(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Every field is optional, but a supplied ``name`` or ``price`` obeys the
    creation rules and may not be ``null``.  ``description`` may be cleared
    with ``null``.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[ProductName] = None
    price: Optional[Price] = None
    description: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_numeric(cls, v: Any) -> Any:
        return _coerce_price(v)

    @field_validator("name", "price")
    @classmethod
    def required_when_supplied(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            raise ValueError(f"The {info.field_name} field may not be null.")
        if info.field_name == "name":
            return _require_name(v)
        return v

    def changes(self) -> Dict[str, Any]:
        """Return only the fields the client supplied."""
        return self.model_dump(exclude_unset=True)
