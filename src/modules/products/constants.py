"""Field limits shared by the Product model, DTOs and migrations."""

NAME_MAX_LENGTH = 255
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
