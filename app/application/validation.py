"""Validación de representaciones de entrada con acumulación de errores."""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.domain.errors import ValidationFailedError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

WRONG_NAME_KEY = "wrongName"
WRONG_NAME_MESSAGE = "First name and last name cannot be the same."


def _names_from(instance: BaseModel | None, payload: Any) -> tuple[Any, Any]:
    if instance is not None:
        return getattr(instance, "first_name", None), getattr(instance, "last_name", None)
    if not isinstance(payload, dict):
        return None, None
    first = payload.get("firstName", payload.get("first_name"))
    last = payload.get("lastName", payload.get("last_name"))
    if isinstance(first, str):
        first = first.strip()
    if isinstance(last, str):
        last = last.strip()
    return first, last


def collect_errors(model_cls: type[M], payload: Any) -> tuple[M | None, list[tuple[str, str]]]:
    """
    Valida payload contra model_cls y contra la regla nombre != apellido.

    Returns:
        (instancia o None, lista de pares (campo, mensaje)).
    """
    errors: list[tuple[str, str]] = []
    instance: M | None = None

    try:
        instance = model_cls.model_validate(payload)
    except PydanticValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "body"
            errors.append((field, error["msg"]))

    first, last = _names_from(instance, payload)
    if isinstance(first, str) and first and first == last:
        errors.append((WRONG_NAME_KEY, WRONG_NAME_MESSAGE))

    return (instance if not errors else None), errors


def validate_representation(model_cls: type[M], payload: Any) -> M:
    """Como collect_errors, pero lanza ValidationFailedError si hay errores."""
    instance, errors = collect_errors(model_cls, payload)
    if errors:
        logger.info(
            "Representation failed validation",
            extra={"model": model_cls.__name__, "errors": errors},
        )
        raise ValidationFailedError(errors)
    return instance
