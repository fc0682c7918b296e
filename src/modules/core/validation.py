"""Request validation applied around view handlers.

``validate_request`` parses the request body into a pydantic DTO before
the handler body executes.  Invalid payloads never reach the handler: the
decorator answers with 400 and the shared error envelope instead.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Callable, Dict, List, Type

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.exceptions import invalid_input_response

logger = structlog.get_logger(__name__)

NON_FIELD_ERRORS = "non_field_errors"


def format_validation_errors(exc: PydanticValidationError) -> Dict[str, List[str]]:
    """Group pydantic error messages by top-level field name."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else NON_FIELD_ERRORS
        message = error["msg"].removeprefix("Value error, ")
        errors.setdefault(field, []).append(message)
    return errors


def validate_request(dto_class: Type[BaseModel]) -> Callable:
    """Decorate a view method so it receives a validated ``dto`` keyword.

    Only keys the DTO declares are read from the body, and only when
    present, so ``dto.model_fields_set`` tells partial updates which
    fields the client actually sent.
    """

    def decorator(handler: Callable[..., Response]) -> Callable[..., Response]:
        @functools.wraps(handler)
        def wrapper(view, request: Request, *args, **kwargs) -> Response:
            data = request.data
            if not isinstance(data, Mapping):
                return invalid_input_response(
                    {NON_FIELD_ERRORS: ["Expected a JSON object."]}
                )

            supplied = {
                name: data[name] for name in dto_class.model_fields if name in data
            }
            try:
                dto = dto_class(**supplied)
            except PydanticValidationError as exc:
                errors = format_validation_errors(exc)
                logger.info(
                    "request.invalid",
                    dto=dto_class.__name__,
                    fields=sorted(errors),
                )
                return invalid_input_response(errors)

            return handler(view, request, *args, dto=dto, **kwargs)

        return wrapper

    return decorator
